"""User aggregate root."""

from datetime import datetime

from pydantic import Field

from forum.domain.model.common import DomainModel, utcnow
from forum.domain.value import UserId, Username


class User(DomainModel):
    """Registered forum user.

    Posts and comments only ever reference users by ID; the username is
    joined in when content is rendered.
    """

    id: UserId
    username: Username
    password_hash: str = Field(repr=False)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
