"""Comments stored in PostgreSQL."""

from typing import Optional

from sqlalchemy import Select, select

from forum.domain.model import Comment
from forum.domain.repository import CommentRepository
from forum.domain.value import CommentId, PostId
from forum.persistence.mappers import comment_to_dict, row_to_comment
from forum.persistence.repository.base import SqlRepository
from forum.persistence.tables import comments_table


def comments_of(post_id: PostId) -> Select:
    """Comments of a post, oldest first."""
    return (
        select(comments_table)
        .where(comments_table.c.post_id == post_id)
        .order_by(comments_table.c.seq)
    )


class PostgresCommentRepository(SqlRepository, CommentRepository):
    """Comment rows; ``seq`` is an identity column assigned on insert."""

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        return await self._one_or_none(
            select(comments_table).where(comments_table.c.id == comment_id),
            row_to_comment,
        )

    async def save(self, comment: Comment) -> Comment:
        await self._insert(comments_table, comment_to_dict(comment))
        return comment

    async def delete(self, comment_id: CommentId) -> bool:
        """Hard-delete a comment; False if it was already gone."""
        deleted = await self._first(
            comments_table.delete()
            .where(comments_table.c.id == comment_id)
            .returning(comments_table.c.id)
        )
        await self.session.flush()
        return deleted is not None
