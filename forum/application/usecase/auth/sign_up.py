"""Sign up use case."""

import logfire
from pydantic import BaseModel, Field

from forum.application.usecase.common import ResponseModel
from forum.domain.service import UserService


class SignUpRequest(BaseModel):
    """Sign up request."""

    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class SignUpResponse(ResponseModel):
    """Sign up response."""

    message: str
    user_id: str


class SignUpUseCase:
    """Use case for registering a new account."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize sign up use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: SignUpRequest) -> SignUpResponse:
        """Register a user with a hashed password.

        Args:
            request: Username and password

        Returns:
            Confirmation with the new user's ID

        Raises:
            ValidationError: If the username is invalid or taken
        """
        with logfire.span("sign_up.execute", username=request.username):
            user = await self.user_service.register(
                request.username, request.password
            )
            return SignUpResponse(
                message="Successfully signed up user", user_id=str(user.id)
            )
