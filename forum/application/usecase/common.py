"""Shared response models and presentation helpers for use cases."""

from datetime import datetime, timezone
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from forum.domain.error import ValidationError

MINUTE_FORMAT = "%Y-%m-%d %H:%M"
SECOND_FORMAT = "%Y-%m-%d %H:%M:%S"


class ResponseModel(BaseModel):
    """Base for responses: snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AuthorInfo(ResponseModel):
    """Author reference embedded in posts and comments."""

    id: str
    username: str


class MessageResponse(ResponseModel):
    """Plain acknowledgement."""

    message: str


def format_created(value: datetime) -> str:
    """Creation timestamps are shown to the minute, in UTC."""
    return value.astimezone(timezone.utc).strftime(MINUTE_FORMAT)


def format_updated(value: datetime) -> str:
    """Modification timestamps are shown to the second, in UTC."""
    return value.astimezone(timezone.utc).strftime(SECOND_FORMAT)


def excerpt(content: str | None, length: int) -> str | None:
    """Truncate to ``length`` characters, marking the cut with ``...``."""
    if content is None or len(content) <= length:
        return content
    return f"{content[:length]}..."


def parse_id(value: str, kind: str) -> UUID:
    """Parse a path identifier, rejecting malformed ones as validation errors."""
    try:
        return UUID(value)
    except ValueError:
        raise ValidationError(f"Invalid {kind} id")
