"""Vote on post use case."""

from pydantic import BaseModel

from forum.application.usecase.common import ResponseModel, parse_id
from forum.domain.service import VoteService
from forum.domain.value import PostId, UserId, VoteDirection, VoteOutcome


class VoteOnPostRequest(BaseModel):
    """Vote request."""

    post_id: str
    user_id: str  # User ID from authenticated user
    direction: VoteDirection


class VoteOnPostResponse(ResponseModel):
    """Vote response."""

    message: str
    outcome: VoteOutcome
    score: int


class VoteOnPostUseCase:
    """Use case for toggling an up- or downvote on a post."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: VoteOnPostRequest) -> VoteOnPostResponse:
        """Execute vote flow.

        Args:
            request: Post, voter and direction

        Returns:
            What the vote changed and the resulting score

        Raises:
            ValidationError: If the post ID is malformed
            NotFoundError: If the post doesn't exist
            ConcurrentUpdateError: If the post kept changing underneath the vote
        """
        result = await self.vote_service.cast_vote(
            PostId(parse_id(request.post_id, "post")),
            UserId(parse_id(request.user_id, "user")),
            request.direction,
        )
        return VoteOnPostResponse(
            message="Vote registered",
            outcome=result.outcome,
            score=result.post.score,
        )
