"""Access token issuing and checking."""

import logfire

from forum.config import AuthSettings
from forum.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Issues access tokens at login and resolves them on each request."""

    span_namespace = "jwt_service"

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def create_token(self, user_id: str) -> str:
        """Sign a token whose subject is ``user_id``."""
        with self._span("create_token", user_id=user_id):
            token = create_token(user_id, self.auth_settings)
            logfire.info(
                "Access token issued",
                user_id=user_id,
                expires_in_hours=self.auth_settings.jwt_expiry_hours,
            )
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Return the claims of a valid token.

        Raises:
            JWTError: If the token is forged, malformed or expired
        """
        with self._span("verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.warn("Access token rejected", reason=str(e))
                raise
            logfire.debug("Access token accepted", user_id=payload.user_id)
            return payload
