"""Toggle vote routes.

Voting the same way twice retracts the vote; voting the other way moves it.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header

from forum.application.usecase.auth import GetCurrentUserUseCase
from forum.application.usecase.vote import (
    VoteOnPostRequest,
    VoteOnPostResponse,
    VoteOnPostUseCase,
)
from forum.domain.value import VoteDirection
from forum.interface.api.errors import http_errors
from forum.interface.api.security import require_user

router = APIRouter(prefix="/votes", tags=["votes"], route_class=DishkaRoute)


async def _toggle(
    post_id: str,
    direction: VoteDirection,
    use_case: VoteOnPostUseCase,
    current_user: GetCurrentUserUseCase,
    authorization: str | None,
) -> VoteOnPostResponse:
    user = await require_user(authorization, current_user)

    with http_errors(f"{direction.value}vote", post_id=post_id, user_id=user.id):
        return await use_case.execute(
            VoteOnPostRequest(post_id=post_id, user_id=user.id, direction=direction)
        )


@router.put("/{post_id}/upvote", response_model=VoteOnPostResponse)
async def upvote(
    post_id: str,
    use_case: FromDishka[VoteOnPostUseCase],
    current_user: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> VoteOnPostResponse:
    """Toggle the caller's upvote on a post."""
    return await _toggle(
        post_id, VoteDirection.UP, use_case, current_user, authorization
    )


@router.put("/{post_id}/downvote", response_model=VoteOnPostResponse)
async def downvote(
    post_id: str,
    use_case: FromDishka[VoteOnPostUseCase],
    current_user: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> VoteOnPostResponse:
    """Toggle the caller's downvote on a post."""
    return await _toggle(
        post_id, VoteDirection.DOWN, use_case, current_user, authorization
    )
