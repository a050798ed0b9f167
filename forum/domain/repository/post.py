"""Post repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from forum.domain.model import FeedEntry, Post
from forum.domain.value import PostId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID, comments included in insertion order.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_ranked(
        self,
        now: datetime,
        limit: int = 10,
        offset: int = 0,
    ) -> List[FeedEntry]:
        """Rank every post at ``now`` and return one window of the result.

        Rank is ``(score + 1) / (age_hours + time_offset) ** gravity``,
        computed over the full collection, sorted descending. Each entry is
        joined with its author's username. Entries carry posts without
        their comments.

        Args:
            now: Reference time for post age
            limit: Maximum number of entries to return
            offset: Number of ranked entries to skip

        Returns:
            Ranked feed entries

        Raises:
            IntegrityViolationError: If a post's author cannot be resolved
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all posts.

        Returns:
            Total number of posts
        """
        pass

    @abstractmethod
    async def create(self, post: Post) -> Post:
        """Insert a new post.

        Args:
            post: The post to insert (comments are ignored)

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def update_content(
        self,
        post_id: PostId,
        title: str | None,
        content: str | None,
        updated_at: datetime,
    ) -> Optional[Post]:
        """Merge new title and/or content into a post.

        Fields passed as None are left untouched.

        Args:
            post_id: ID of the post to update
            title: New title, or None to keep the current one
            content: New content, or None to keep the current one
            updated_at: New modification timestamp

        Returns:
            Updated post, or None if the post doesn't exist
        """
        pass

    @abstractmethod
    async def save_votes(self, post: Post) -> Optional[Post]:
        """Persist a post's vote sets and score in one conditional write.

        The write only happens if the stored version still equals
        ``post.version``; on success the stored version is incremented.

        Args:
            post: Post carrying the new ledger and recomputed score

        Returns:
            The stored post with its new version, or None if the post was
            changed (or deleted) since it was read
        """
        pass

    @abstractmethod
    async def touch(self, post_id: PostId, updated_at: datetime) -> None:
        """Refresh a post's modification timestamp.

        Args:
            post_id: The post ID
            updated_at: New modification timestamp
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> None:
        """Delete a post together with its comments.

        Args:
            post_id: The post ID to delete
        """
        pass
