"""Login use case."""

import logfire
from pydantic import BaseModel, Field

from forum.application.usecase.common import ResponseModel
from forum.domain.error import ValidationError
from forum.domain.service import JWTService, UserService


class LoginRequest(BaseModel):
    """Login request."""

    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class LoginResponse(ResponseModel):
    """Login response."""

    access_token: str
    user_id: str


class LoginUseCase:
    """Use case for exchanging credentials for an access token."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Steps:
        1. Check the credentials against the stored bcrypt hash
        2. Issue a JWT carrying the user ID

        Args:
            request: Username and password

        Returns:
            Access token and user ID

        Raises:
            ValidationError: If the username or password is wrong
        """
        with logfire.span("login.execute", username=request.username):
            user = await self.user_service.authenticate(
                request.username, request.password
            )
            if user is None:
                raise ValidationError("Wrong username or password")

            token = self.jwt_service.create_token(str(user.id))
            return LoginResponse(access_token=token, user_id=str(user.id))
