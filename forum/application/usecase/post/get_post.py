"""Get post use case."""

import logfire
from pydantic import BaseModel

from forum.application.usecase.common import (
    AuthorInfo,
    ResponseModel,
    format_created,
    format_updated,
    parse_id,
)
from forum.domain.error import IntegrityViolationError
from forum.domain.model import User
from forum.domain.service import PostService, UserService
from forum.domain.value import PostId, UserId


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str


class CommentItem(ResponseModel):
    """Comment as shown under a post."""

    id: str
    content: str
    author: AuthorInfo
    created_at: str
    updated_at: str


class GetPostResponse(ResponseModel):
    """Full post with comments."""

    id: str
    title: str
    content: str | None
    author: AuthorInfo
    score: int
    upvotes: list[str]
    downvotes: list[str]
    comments: list[CommentItem]
    created_at: str
    updated_at: str


class GetPostUseCase:
    """Use case for reading one post with its comments."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service (author lookups)
        """
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: GetPostRequest) -> GetPostResponse:
        """Load a post and resolve every author it references.

        Args:
            request: Post ID

        Returns:
            Post with upper-cased title, full content and comments

        Raises:
            ValidationError: If the post ID is malformed
            NotFoundError: If the post doesn't exist
            IntegrityViolationError: If a referenced author is missing
        """
        post_id = PostId(parse_id(request.post_id, "post"))
        post = await self.post_service.get_post(post_id)

        authors = await self.user_service.get_many(
            [post.author_id, *(c.author_id for c in post.comments)]
        )

        def author_of(user_id: UserId) -> AuthorInfo:
            user: User | None = authors.get(user_id)
            if user is None:
                logfire.error(
                    "Author missing", post_id=str(post.id), author_id=str(user_id)
                )
                raise IntegrityViolationError(f"Author {user_id} does not exist")
            return AuthorInfo(id=str(user.id), username=user.username.root)

        return GetPostResponse(
            id=str(post.id),
            title=post.title.upper(),
            content=post.content,
            author=author_of(post.author_id),
            score=post.score,
            upvotes=sorted(str(u) for u in post.upvoters),
            downvotes=sorted(str(u) for u in post.downvoters),
            comments=[
                CommentItem(
                    id=str(comment.id),
                    content=comment.content,
                    author=author_of(comment.author_id),
                    created_at=format_created(comment.created_at),
                    updated_at=format_updated(comment.updated_at),
                )
                for comment in post.comments
            ],
            created_at=format_created(post.created_at),
            updated_at=format_updated(post.updated_at),
        )
