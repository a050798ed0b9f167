"""Post domain service."""

from uuid import uuid4

import logfire

from forum.domain.error import NotFoundError, ValidationError
from forum.domain.model import Post
from forum.domain.model.common import utcnow
from forum.domain.repository import PostRepository
from forum.domain.value import PostId, UserId

from .base import Service


class PostService(Service):
    """Domain service for post operations."""

    span_namespace = "post_service"

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def create_post(
        self, title: str, content: str | None, author_id: UserId
    ) -> Post:
        """Create a post with an empty vote ledger.

        Args:
            title: Post title (trimmed by the model)
            content: Optional body
            author_id: Author user ID

        Returns:
            Saved post
        """
        with self._span(
            "create_post", title=title, author_id=str(author_id)
        ):
            now = utcnow()
            post = Post(
                id=PostId(uuid4()),
                title=title,
                content=content,
                author_id=author_id,
                created_at=now,
                updated_at=now,
            )
            saved = await self.post_repository.create(post)
            logfire.info("Post created", post_id=str(saved.id))
            return saved

    async def get_post(self, post_id: PostId) -> Post:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post with its comments

        Raises:
            NotFoundError: If post not found
        """
        with self._span("get_post", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)

            if not post:
                logfire.warn("Post not found", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

            logfire.info("Post found", post_id=str(post_id), title=post.title)
            return post

    async def update_post(
        self, post_id: PostId, title: str | None, content: str | None
    ) -> Post:
        """Merge new title and/or content into a post.

        Args:
            post_id: Post ID
            title: New title, or None to keep it
            content: New content, or None to keep it

        Returns:
            Updated post

        Raises:
            NotFoundError: If post not found
            ValidationError: If the new title is blank or a field is too long
        """
        if title is not None:
            title = title.strip()
            if not 1 <= len(title) <= 300:
                raise ValidationError("Title must be between 1 and 300 characters")
        if content is not None and len(content) > 10000:
            raise ValidationError("Content must be at most 10000 characters")

        with self._span(
            "update_post",
            post_id=str(post_id),
            title_changed=title is not None,
            content_changed=content is not None,
        ):
            updated = await self.post_repository.update_content(
                post_id,
                title=title,
                content=content,
                updated_at=utcnow(),
            )
            if updated is None:
                logfire.warn("Post not found for update", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

            logfire.info("Post updated", post_id=str(post_id))
            return updated

    async def delete_post(self, post_id: PostId) -> None:
        """Delete a post and its comments.

        Args:
            post_id: Post ID
        """
        with self._span("delete_post", post_id=str(post_id)):
            await self.post_repository.delete(post_id)
            logfire.info("Post deleted", post_id=str(post_id))
