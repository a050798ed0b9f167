"""Users stored in PostgreSQL."""

from typing import Iterable, Optional

import logfire
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from forum.domain.error import ValidationError
from forum.domain.model import User
from forum.domain.repository import UserRepository
from forum.domain.value import UserId, Username
from forum.persistence.mappers import row_to_user, user_to_dict
from forum.persistence.repository.base import SqlRepository
from forum.persistence.tables import users_table


class PostgresUserRepository(SqlRepository, UserRepository):
    """User rows keyed by UUID, with a unique ``username`` column."""

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return await self._one_or_none(
            select(users_table).where(users_table.c.id == user_id), row_to_user
        )

    async def find_by_ids(self, user_ids: Iterable[UserId]) -> dict[UserId, User]:
        """Load several users with one ``IN`` query.

        IDs with no row are simply absent from the result.
        """
        wanted = set(user_ids)
        if not wanted:
            return {}

        users = await self._many(
            select(users_table).where(users_table.c.id.in_(wanted)), row_to_user
        )
        return {user.id: user for user in users}

    async def find_by_username(self, username: Username) -> Optional[User]:
        return await self._one_or_none(
            select(users_table).where(users_table.c.username == username.root),
            row_to_user,
        )

    async def save(self, user: User) -> User:
        """Insert a user inside a savepoint.

        The unique constraint on ``username`` is the final arbiter between
        concurrent sign-ups; the savepoint keeps the outer transaction usable
        after a violation.
        """
        try:
            async with self.session.begin_nested():
                await self._insert(users_table, user_to_dict(user))
        except IntegrityError:
            logfire.warn("Username taken on insert", username=user.username.root)
            raise ValidationError("Username taken")
        return user
