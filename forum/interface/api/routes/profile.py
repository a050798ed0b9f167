"""Profile routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header

from forum.application.usecase.auth import (
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from forum.interface.api.security import require_user

router = APIRouter(tags=["profile"], route_class=DishkaRoute)


@router.get("/profile", response_model=GetCurrentUserResponse)
async def get_profile(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> GetCurrentUserResponse:
    """Return the authenticated user's ID and username."""
    return await require_user(authorization, get_current_user_use_case)
