"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .post import InMemoryPostRepository
from .store import InMemoryDatabase
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryDatabase",
    "InMemoryPostRepository",
    "InMemoryUserRepository",
]
