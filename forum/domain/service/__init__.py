"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .feed_service import FeedService
from .jwt_service import JWTService
from .post_service import PostService
from .ranking import rank
from .user_service import UserService
from .vote_service import VoteResult, VoteService

__all__ = [
    "CommentService",
    "FeedService",
    "JWTService",
    "PostService",
    "Service",
    "UserService",
    "VoteResult",
    "VoteService",
    "rank",
]
