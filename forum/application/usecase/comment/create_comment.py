"""Commenting on a post."""

from pydantic import BaseModel, Field

from forum.application.usecase.common import ResponseModel, parse_id
from forum.domain.service import CommentService, PostService
from forum.domain.value import PostId, UserId


class CreateCommentRequest(BaseModel):
    """A new comment; ``author_id`` is the authenticated caller."""

    post_id: str
    content: str = Field(min_length=1, max_length=10000)
    author_id: str


class CreateCommentResponse(ResponseModel):
    id: str


class CreateCommentUseCase:
    """Appends a comment to an existing post and bumps its ``updated_at``."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
    ) -> None:
        self.comment_service = comment_service
        self.post_service = post_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Comment as the requester.

        Raises:
            ValidationError: Malformed post or author ID
            NotFoundError: No such post
        """
        post = await self.post_service.get_post(
            PostId(parse_id(request.post_id, "post"))
        )
        comment = await self.comment_service.attach_comment(
            post,
            author_id=UserId(parse_id(request.author_id, "user")),
            content=request.content,
        )
        return CreateCommentResponse(id=str(comment.id))
