"""Delete post use case."""

from pydantic import BaseModel

from forum.application.usecase.common import MessageResponse, parse_id
from forum.domain.error import NotAuthorizedError
from forum.domain.service import PostService
from forum.domain.value import PostId, UserId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str
    user_id: str  # User ID from authenticated user


class DeletePostUseCase:
    """Use case for deleting a post (author only)."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize delete post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> MessageResponse:
        """Delete a post and its comments.

        Raises:
            ValidationError: If the post ID is malformed
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
                action="delete",
            )

        await self.post_service.delete_post(post_id)
        return MessageResponse(message="Post deleted")
