"""Unit tests for UserService."""

from unittest.mock import AsyncMock, patch
from uuid import uuid4

import pytest

from forum.domain.error import NotFoundError, ValidationError
from forum.domain.repository import UserRepository
from forum.domain.service import UserService
from forum.domain.value import UserId, Username
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestRegister:
    """Tests for register method."""

    @pytest.mark.asyncio
    async def test_register_hashes_password(self, unit_env):
        """The stored hash never equals the plain-text password."""
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)

        user = await user_service.register("alice", "s3cret")

        assert user.username == Username("alice")
        assert user.password_hash != "s3cret"
        assert user.password_hash.startswith("$2")
        assert await user_repo.find_by_id(user.id) == user

    @pytest.mark.asyncio
    async def test_register_trims_username(self, unit_env):
        user_service = await unit_env.get(UserService)

        user = await user_service.register("  bob  ", "pw")

        assert user.username.root == "bob"

    @pytest.mark.asyncio
    async def test_duplicate_username_rejected(self, unit_env):
        user_service = await unit_env.get(UserService)
        await user_service.register("alice", "pw1")

        with pytest.raises(ValidationError, match="Username taken"):
            await user_service.register("alice", "pw2")

    @pytest.mark.asyncio
    async def test_username_claimed_after_check_rejected(self, unit_env):
        """A sign-up that wins the race after our lookup still blocks the insert."""
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        await user_service.register("alice", "pw1")

        with patch.object(
            user_repo, "find_by_username", AsyncMock(return_value=None)
        ):
            with pytest.raises(ValidationError, match="Username taken"):
                await user_service.register("alice", "pw2")

    @pytest.mark.asyncio
    async def test_blank_username_rejected(self, unit_env):
        user_service = await unit_env.get(UserService)

        with pytest.raises(ValidationError):
            await user_service.register("   ", "pw")

    @pytest.mark.asyncio
    async def test_overlong_password_rejected(self, unit_env):
        user_service = await unit_env.get(UserService)

        with pytest.raises(ValidationError):
            await user_service.register("carol", "x" * 73)


class TestAuthenticate:
    """Tests for authenticate method."""

    @pytest.mark.asyncio
    async def test_correct_password(self, unit_env):
        user_service = await unit_env.get(UserService)
        registered = await user_service.register("alice", "s3cret")

        user = await user_service.authenticate("alice", "s3cret")

        assert user is not None
        assert user.id == registered.id

    @pytest.mark.asyncio
    async def test_wrong_password(self, unit_env):
        user_service = await unit_env.get(UserService)
        await user_service.register("alice", "s3cret")

        assert await user_service.authenticate("alice", "nope") is None

    @pytest.mark.asyncio
    async def test_unknown_user(self, unit_env):
        user_service = await unit_env.get(UserService)

        assert await user_service.authenticate("ghost", "pw") is None


class TestLookups:
    """Tests for get_by_id and get_many."""

    @pytest.mark.asyncio
    async def test_get_missing_user_raises(self, unit_env):
        user_service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError):
            await user_service.get_by_id(UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_get_many_skips_unknown_ids(self, unit_env):
        user_service = await unit_env.get(UserService)
        alice = await user_service.register("alice", "pw")
        bob = await user_service.register("bob", "pw")

        users = await user_service.get_many([alice.id, bob.id, UserId(uuid4())])

        assert set(users) == {alice.id, bob.id}
        assert await user_service.get_many([]) == {}
