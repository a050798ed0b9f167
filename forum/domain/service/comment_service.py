"""Comment domain service."""

from uuid import uuid4

import logfire

from forum.domain.error import NotFoundError
from forum.domain.model import Comment, Post
from forum.domain.model.common import utcnow
from forum.domain.repository import CommentRepository, PostRepository
from forum.domain.value import CommentId, UserId

from .base import Service


class CommentService(Service):
    """Domain service for attaching comments to and detaching them from posts."""

    span_namespace = "comment_service"

    def __init__(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            post_repository: Post repository
        """
        self.comment_repository = comment_repository
        self.post_repository = post_repository

    async def attach_comment(
        self, post: Post, author_id: UserId, content: str
    ) -> Comment:
        """Append a new comment to a post.

        The comment row and the post's ``updated_at`` are written through
        the same request-scoped session, so they commit together.

        Args:
            post: Post being commented on
            author_id: Comment author
            content: Comment text

        Returns:
            Created comment
        """
        with self._span(
            "attach_comment",
            post_id=str(post.id),
            author_id=str(author_id),
        ):
            now = utcnow()
            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post.id,
                author_id=author_id,
                content=content,
                created_at=now,
                updated_at=now,
            )

            saved = await self.comment_repository.save(comment)
            await self.post_repository.touch(post.id, now)

            logfire.info(
                "Comment attached",
                comment_id=str(saved.id),
                post_id=str(post.id),
                position=len(post.comments),
            )
            return saved

    async def detach_comment(self, post: Post, comment_id: CommentId) -> Comment:
        """Remove a comment from a post's sequence.

        Authorization is the caller's job; this only checks membership.

        Args:
            post: Post owning the comment
            comment_id: Comment to remove

        Returns:
            The removed comment

        Raises:
            NotFoundError: If the comment is not part of the post
        """
        with self._span(
            "detach_comment",
            post_id=str(post.id),
            comment_id=str(comment_id),
        ):
            comment = post.find_comment(comment_id)
            if comment is None:
                logfire.warn(
                    "Comment not found on post",
                    post_id=str(post.id),
                    comment_id=str(comment_id),
                )
                raise NotFoundError("Comment", str(comment_id))

            deleted = await self.comment_repository.delete(comment_id)
            if not deleted:
                raise NotFoundError("Comment", str(comment_id))
            await self.post_repository.touch(post.id, utcnow())

            logfire.info(
                "Comment detached", post_id=str(post.id), comment_id=str(comment_id)
            )
            return comment
