"""Resolve a bearer token to the user it was issued to."""

from uuid import UUID

from pydantic import BaseModel

from forum.application.usecase.common import ResponseModel
from forum.domain.error import AuthenticationError, NotFoundError
from forum.domain.service import JWTService, UserService
from forum.domain.value import UserId
from forum.util.jwt import JWTError


class GetCurrentUserRequest(BaseModel):
    token: str


class GetCurrentUserResponse(ResponseModel):
    """The caller's identity, also served as ``GET /profile``."""

    id: str
    username: str


class GetCurrentUserUseCase:
    """Authenticate a request from its access token."""

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Verify the token and load the user named by its subject.

        Raises:
            AuthenticationError: If the token is forged, malformed or
                expired, its subject is not a UUID, or the user it names has
                since been removed
        """
        try:
            claims = self.jwt_service.verify_token(request.token)
            subject = UserId(UUID(claims.user_id))
        except (JWTError, ValueError) as e:
            raise AuthenticationError(str(e)) from e

        try:
            user = await self.user_service.get_by_id(subject)
        except NotFoundError as e:
            raise AuthenticationError("Unauthenticated") from e

        return GetCurrentUserResponse(id=str(user.id), username=user.username.root)
