"""Delete comment use case."""

from pydantic import BaseModel

from forum.application.usecase.common import MessageResponse, parse_id
from forum.domain.error import NotAuthorizedError, NotFoundError
from forum.domain.service import CommentService, PostService
from forum.domain.value import CommentId, PostId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    post_id: str
    comment_id: str
    user_id: str  # User ID from authenticated user


class DeleteCommentUseCase:
    """Use case for removing a comment from a post.

    Allowed for the comment's author and for the author of the post it
    belongs to.
    """

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
    ) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service

    async def execute(self, request: DeleteCommentRequest) -> MessageResponse:
        """Execute delete comment flow.

        Raises:
            ValidationError: If an ID is malformed
            NotFoundError: If the post or comment doesn't exist
            NotAuthorizedError: If the requester wrote neither the post
                nor the comment
        """
        post_id = PostId(parse_id(request.post_id, "post"))
        comment_id = CommentId(parse_id(request.comment_id, "comment"))
        user_id = UserId(parse_id(request.user_id, "user"))

        post = await self.post_service.get_post(post_id)
        comment = post.find_comment(comment_id)
        if comment is None:
            raise NotFoundError("Comment", str(comment_id))

        if not post.is_authored_by(user_id) and comment.author_id != user_id:
            raise NotAuthorizedError(
                resource="comment",
                resource_id=str(comment_id),
                user_id=str(user_id),
                action="delete",
            )

        await self.comment_service.detach_comment(post, comment_id)
        return MessageResponse(message="Comment deleted")
