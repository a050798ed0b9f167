"""Domain model entities for the forum."""

from forum.domain.model.comment import Comment
from forum.domain.model.feed import FeedEntry, FeedPage
from forum.domain.model.post import Post
from forum.domain.model.user import User

__all__ = [
    "Comment",
    "FeedEntry",
    "FeedPage",
    "Post",
    "User",
]
