"""Comment entity.

Comments belong to exactly one post and are kept in insertion order.
"""

from datetime import datetime

from pydantic import Field

from forum.domain.model.common import DomainModel, utcnow
from forum.domain.value import CommentId, PostId, UserId


class Comment(DomainModel):
    """Comment on a post.

    Comments are flat (no threading); a post's comment sequence is
    append-only apart from deletion by ID.
    """

    id: CommentId
    post_id: PostId
    author_id: UserId
    content: str = Field(min_length=1, max_length=10000)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
