"""Base model for all domain entities."""

from datetime import datetime, timezone
from typing import Any, Self

from pydantic import BaseModel, ConfigDict


def utcnow() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


class DomainModel(BaseModel):
    """Base class for all domain models.

    Provides common configuration for immutability and custom types.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        arbitrary_types_allowed=True,
    )

    def replace(self, **changes: Any) -> Self:
        """Return a copy with ``changes`` applied.

        Unlike ``model_copy(update=...)`` the copy is validated again, so
        model invariants still hold on the result.
        """
        return self.__class__(**{**dict(self), **changes})
