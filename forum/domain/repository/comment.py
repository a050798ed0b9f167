"""Comment storage contract."""

from abc import ABC, abstractmethod
from typing import Optional

from forum.domain.model.comment import Comment
from forum.domain.value import CommentId


class CommentRepository(ABC):
    """Flat, per-post comment sequences.

    A post's comments come back in the order they were saved; deleting one
    leaves the order of the rest untouched.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Append ``comment`` to the end of its post's sequence."""
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool:
        """Remove one comment.

        Returns:
            False when no comment had that ID
        """
        pass
