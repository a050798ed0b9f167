"""User domain service."""

from typing import Iterable
from uuid import uuid4

import logfire

from forum.domain.error import NotFoundError, ValidationError
from forum.domain.model import User
from forum.domain.model.common import utcnow
from forum.domain.repository import UserRepository
from forum.domain.value import UserId, Username
from forum.util.password import hash_password, verify_password

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    span_namespace = "user_service"

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with self._span("get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            logfire.info("User found", user_id=str(user_id), username=user.username.root)
            return user

    async def get_many(self, user_ids: Iterable[UserId]) -> dict[UserId, User]:
        """Load several users at once (for author joins).

        Args:
            user_ids: User IDs

        Returns:
            Mapping of found IDs to users
        """
        ids = set(user_ids)
        if not ids:
            return {}
        return await self.user_repository.find_by_ids(ids)

    async def register(self, username: str, password: str) -> User:
        """Create a user with a hashed password.

        Args:
            username: Desired username
            password: Plain-text password

        Returns:
            Created user

        Raises:
            ValidationError: If the username is invalid or already taken
        """
        try:
            name = Username(username)
        except ValueError as e:
            raise ValidationError(str(e))

        with self._span("register", username=name.root):
            if await self.user_repository.find_by_username(name):
                logfire.warn("Username taken", username=name.root)
                raise ValidationError("Username taken")

            try:
                password_hash = hash_password(password)
            except ValueError as e:
                raise ValidationError(str(e))

            now = utcnow()
            user = User(
                id=UserId(uuid4()),
                username=name,
                password_hash=password_hash,
                created_at=now,
                updated_at=now,
            )
            saved = await self.user_repository.save(user)
            logfire.info("User registered", user_id=str(saved.id), username=name.root)
            return saved

    async def authenticate(self, username: str, password: str) -> User | None:
        """Check credentials.

        Args:
            username: Username
            password: Plain-text password

        Returns:
            The user if the credentials match, None otherwise
        """
        try:
            name = Username(username)
        except ValueError:
            return None

        with self._span("authenticate", username=name.root):
            user = await self.user_repository.find_by_username(name)
            if user is None or not verify_password(password, user.password_hash):
                logfire.warn("Failed login", username=name.root)
                return None
            logfire.info("User authenticated", user_id=str(user.id))
            return user
