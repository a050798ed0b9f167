"""In-memory comment repository for testing."""

from typing import Optional

from forum.domain.model.comment import Comment
from forum.domain.repository.comment import CommentRepository
from forum.domain.value import CommentId

from .store import InMemoryDatabase


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryDatabase | None = None) -> None:
        self._store = store or InMemoryDatabase()

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._store.comments.get(comment_id)

    async def save(self, comment: Comment) -> Comment:
        """Append a comment."""
        self._store.comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment."""
        return self._store.comments.pop(comment_id, None) is not None
