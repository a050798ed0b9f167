"""Integration tests for PostgresUserRepository."""

import os
from uuid import uuid4

import pytest

from forum.domain.error import ValidationError
from forum.domain.repository import UserRepository
from tests.conftest import make_user
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    "DATABASE__URL" not in os.environ,
    reason="DATABASE__URL not set; integration tests need PostgreSQL",
)

integration_env = create_env_fixture(unmock={"persistence"})


class TestPostgresUserRepository:
    """Integration tests for username uniqueness."""

    @pytest.mark.asyncio
    async def test_duplicate_username_rejected_by_constraint(self, integration_env):
        user_repo = await integration_env.get(UserRepository)
        username = f"user-{uuid4().hex[:12]}"
        first = await user_repo.save(make_user(username))

        with pytest.raises(ValidationError, match="Username taken"):
            await user_repo.save(make_user(username))

        # The savepoint rolled back alone; the first row is still readable
        found = await user_repo.find_by_username(first.username)
        assert found.id == first.id
