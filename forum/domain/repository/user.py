"""User storage contract."""

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from forum.domain.model.user import User
from forum.domain.value import UserId, Username


class UserRepository(ABC):
    """Registered accounts, unique by username."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Iterable[UserId]) -> dict[UserId, User]:
        """Batch lookup used to attach author names to feed and post views.

        Duplicate IDs are allowed; IDs without an account are left out of
        the result rather than raising.
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[User]:
        """Exact match on the trimmed username."""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Insert a new account.

        Raises:
            ValidationError: The username is already stored, e.g. by a
                sign-up that raced past the caller's own check
        """
        pass
