"""Shared in-memory storage for the in-memory repositories."""

from dataclasses import dataclass, field

from forum.domain.model import Comment, Post, User
from forum.domain.value import CommentId, PostId, UserId


@dataclass
class InMemoryDatabase:
    """Tables kept in plain dicts.

    Repositories are request-scoped but the store outlives them, so data
    written in one request is visible in the next. Dicts keep insertion
    order, which stands in for the ``seq`` column on comments.
    """

    users: dict[UserId, User] = field(default_factory=dict)
    posts: dict[PostId, Post] = field(default_factory=dict)
    comments: dict[CommentId, Comment] = field(default_factory=dict)

    def comments_for(self, post_id: PostId) -> tuple[Comment, ...]:
        return tuple(c for c in self.comments.values() if c.post_id == post_id)
