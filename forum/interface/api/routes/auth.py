"""Account routes: sign-up and log-in."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status

from forum.application.usecase.auth import (
    LoginRequest,
    LoginResponse,
    LoginUseCase,
    SignUpRequest,
    SignUpResponse,
    SignUpUseCase,
)
from forum.interface.api.errors import http_errors

router = APIRouter(prefix="/auth", tags=["auth"], route_class=DishkaRoute)


@router.post(
    "/sign-up", response_model=SignUpResponse, status_code=status.HTTP_201_CREATED
)
async def sign_up(
    request: SignUpRequest,
    use_case: FromDishka[SignUpUseCase],
) -> SignUpResponse:
    """Register an account.

    Raises:
        HTTPException: 400 if the username is taken or invalid, or the
            password is empty
    """
    with http_errors("sign up", username=request.username):
        return await use_case.execute(request)


@router.post("/log-in", response_model=LoginResponse)
async def log_in(
    request: LoginRequest,
    use_case: FromDishka[LoginUseCase],
) -> LoginResponse:
    """Exchange a username and password for an access token.

    The token is valid for ``AUTH__JWT_EXPIRY_HOURS`` (one hour by default).

    Raises:
        HTTPException: 400 "Wrong username or password" on bad credentials
    """
    with http_errors("log in", username=request.username):
        return await use_case.execute(request)
