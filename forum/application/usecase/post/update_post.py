"""Update post use case."""

from pydantic import BaseModel

from forum.application.usecase.common import (
    ResponseModel,
    format_updated,
    parse_id,
)
from forum.domain.error import NotAuthorizedError
from forum.domain.service import PostService
from forum.domain.value import PostId, UserId


class UpdatePostRequest(BaseModel):
    """Update post request."""

    post_id: str
    user_id: str  # User ID from authenticated user
    title: str | None = None
    content: str | None = None


class UpdatePostResponse(ResponseModel):
    """Update post response."""

    message: str
    id: str
    updated_at: str


class UpdatePostUseCase:
    """Use case for editing a post's title and/or content."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: UpdatePostRequest) -> UpdatePostResponse:
        """Execute update post flow.

        Steps:
        1. Load the post
        2. Check the requester is its author
        3. Merge the supplied fields

        Args:
            request: Post ID, requester and new values

        Returns:
            Confirmation with the new modification time

        Raises:
            ValidationError: If the ID or a new value is invalid
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the requester isn't the author
        """
        post_id = PostId(parse_id(request.post_id, "post"))
        user_id = UserId(parse_id(request.user_id, "user"))

        post = await self.post_service.get_post(post_id)
        if not post.is_authored_by(user_id):
            raise NotAuthorizedError(
                resource="post",
                resource_id=str(post_id),
                user_id=str(user_id),
                action="edit",
            )

        updated = await self.post_service.update_post(
            post_id, title=request.title, content=request.content
        )
        return UpdatePostResponse(
            message="Post updated",
            id=str(updated.id),
            updated_at=format_updated(updated.updated_at),
        )
