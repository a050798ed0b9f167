"""In-memory user repository for testing."""

from typing import Iterable, Optional

from forum.domain.error import ValidationError
from forum.domain.model.user import User
from forum.domain.repository.user import UserRepository
from forum.domain.value import UserId, Username

from .store import InMemoryDatabase


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryDatabase | None = None) -> None:
        self._store = store or InMemoryDatabase()

    @property
    def _users(self) -> dict[UserId, User]:
        return self._store.users

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_ids(self, user_ids: Iterable[UserId]) -> dict[UserId, User]:
        """Find several users at once."""
        return {uid: self._users[uid] for uid in set(user_ids) if uid in self._users}

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username."""
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    async def save(self, user: User) -> User:
        """Save a user; usernames are unique like the ``users`` table."""
        if any(u.username == user.username for u in self._users.values()):
            raise ValidationError("Username taken")
        self._users[user.id] = user
        return user
