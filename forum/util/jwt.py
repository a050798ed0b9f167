"""Access token encoding and decoding.

Tokens are HS256-signed (by default) and carry the standard ``sub``
(user ID), ``iat``, ``exp`` and ``iss`` claims.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from forum.config import AuthSettings

REQUIRED_CLAIMS = ["sub", "iat", "exp", "iss"]


class TokenPayload(BaseModel):
    """Claims of a verified access token."""

    user_id: str
    issued_at: datetime
    exp: datetime


class JWTError(Exception):
    """Token is missing, malformed, forged or expired."""


def create_token(user_id: str, settings: AuthSettings) -> str:
    """Sign an access token for ``user_id`` valid for ``jwt_expiry_hours``."""
    now = datetime.now(timezone.utc)
    claims = {
        "sub": user_id,
        "iat": now,
        "exp": now + timedelta(hours=settings.jwt_expiry_hours),
        "iss": settings.jwt_issuer,
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check a token's signature, issuer and lifetime.

    Args:
        token: Encoded token from the Authorization header
        settings: Authentication settings

    Returns:
        The verified claims

    Raises:
        JWTError: "Token has expired" past ``exp``, "Invalid token" otherwise
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            issuer=settings.jwt_issuer,
            leeway=settings.jwt_leeway_seconds,
            options={"require": REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")

    subject = claims["sub"]
    if not isinstance(subject, str) or not subject:
        raise JWTError("Invalid token")

    return TokenPayload(
        user_id=subject,
        issued_at=datetime.fromtimestamp(claims["iat"], tz=timezone.utc),
        exp=datetime.fromtimestamp(claims["exp"], tz=timezone.utc),
    )
