"""Unit tests for the authentication use cases."""

from uuid import uuid4

import pytest
from dishka import AsyncContainer

from forum.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    SignUpRequest,
    SignUpUseCase,
)
from forum.domain.error import AuthenticationError, ValidationError
from forum.domain.service import JWTService
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestSignUpUseCase:
    """Tests for SignUpUseCase."""

    @pytest.mark.asyncio
    async def test_sign_up_returns_user_id(self, unit_env: AsyncContainer):
        sign_up = await unit_env.get(SignUpUseCase)

        response = await sign_up.execute(
            SignUpRequest(username="alice", password="pw")
        )

        assert response.message == "Successfully signed up user"
        assert response.user_id

    @pytest.mark.asyncio
    async def test_sign_up_twice_fails(self, unit_env: AsyncContainer):
        sign_up = await unit_env.get(SignUpUseCase)
        await sign_up.execute(SignUpRequest(username="alice", password="pw"))

        with pytest.raises(ValidationError, match="Username taken"):
            await sign_up.execute(SignUpRequest(username="alice", password="pw"))


class TestLoginUseCase:
    """Tests for LoginUseCase."""

    @pytest.mark.asyncio
    async def test_login_issues_token_for_user(self, unit_env: AsyncContainer):
        """Token returned by login names the user who logged in."""
        # Arrange
        sign_up = await unit_env.get(SignUpUseCase)
        login = await unit_env.get(LoginUseCase)
        jwt_service = await unit_env.get(JWTService)
        signed_up = await sign_up.execute(
            SignUpRequest(username="alice", password="pw")
        )

        # Act
        response = await login.execute(LoginRequest(username="alice", password="pw"))

        # Assert
        assert response.user_id == signed_up.user_id
        payload = jwt_service.verify_token(response.access_token)
        assert payload.user_id == signed_up.user_id

    @pytest.mark.asyncio
    async def test_wrong_password(self, unit_env: AsyncContainer):
        sign_up = await unit_env.get(SignUpUseCase)
        login = await unit_env.get(LoginUseCase)
        await sign_up.execute(SignUpRequest(username="alice", password="pw"))

        with pytest.raises(ValidationError, match="Wrong username or password"):
            await login.execute(LoginRequest(username="alice", password="wrong"))

    @pytest.mark.asyncio
    async def test_unknown_user(self, unit_env: AsyncContainer):
        login = await unit_env.get(LoginUseCase)

        with pytest.raises(ValidationError, match="Wrong username or password"):
            await login.execute(LoginRequest(username="ghost", password="pw"))


class TestGetCurrentUserUseCase:
    """Tests for GetCurrentUserUseCase."""

    @pytest.mark.asyncio
    async def test_resolves_token(self, unit_env: AsyncContainer):
        sign_up = await unit_env.get(SignUpUseCase)
        login = await unit_env.get(LoginUseCase)
        get_current_user = await unit_env.get(GetCurrentUserUseCase)
        await sign_up.execute(SignUpRequest(username="alice", password="pw"))
        token = (
            await login.execute(LoginRequest(username="alice", password="pw"))
        ).access_token

        user = await get_current_user.execute(GetCurrentUserRequest(token=token))

        assert user.username == "alice"

    @pytest.mark.asyncio
    async def test_invalid_token(self, unit_env: AsyncContainer):
        get_current_user = await unit_env.get(GetCurrentUserUseCase)

        with pytest.raises(AuthenticationError):
            await get_current_user.execute(GetCurrentUserRequest(token="garbage"))

    @pytest.mark.asyncio
    async def test_token_for_unknown_user(self, unit_env: AsyncContainer):
        """A valid token naming a user that doesn't exist is rejected."""
        jwt_service = await unit_env.get(JWTService)
        get_current_user = await unit_env.get(GetCurrentUserUseCase)
        token = jwt_service.create_token(str(uuid4()))

        with pytest.raises(AuthenticationError, match="Unauthenticated"):
            await get_current_user.execute(GetCurrentUserRequest(token=token))

    @pytest.mark.asyncio
    async def test_token_with_malformed_user_id(self, unit_env: AsyncContainer):
        jwt_service = await unit_env.get(JWTService)
        get_current_user = await unit_env.get(GetCurrentUserUseCase)
        token = jwt_service.create_token("not-a-uuid")

        with pytest.raises(AuthenticationError):
            await get_current_user.execute(GetCurrentUserRequest(token=token))
