"""Bearer token authentication for routes."""

from fastapi import HTTPException, status

from forum.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from forum.interface.api.errors import http_errors


def bearer_token(authorization: str | None) -> str | None:
    """Extract the token from an ``Authorization: Bearer <token>`` header."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


async def require_user(
    authorization: str | None,
    get_current_user_use_case: GetCurrentUserUseCase,
) -> GetCurrentUserResponse:
    """Resolve the caller or fail with 401.

    Args:
        authorization: Raw Authorization header
        get_current_user_use_case: Get current user use case from DI

    Returns:
        The authenticated user

    Raises:
        HTTPException: 401 if the token is missing, invalid or expired, or
            names a user that no longer exists
    """
    token = bearer_token(authorization)
    if token is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token is missing",
        )

    with http_errors("authenticate"):
        return await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=token)
        )
