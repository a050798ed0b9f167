"""Domain value objects for the forum.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum

from forum.domain.value.common import BoundedText


class VoteDirection(str, Enum):
    """Direction of a vote."""

    UP = "up"
    DOWN = "down"


class VoteOutcome(str, Enum):
    """Net membership change produced by a single toggle vote."""

    ADDED_UP = "added_up"
    ADDED_DOWN = "added_down"
    REMOVED_UP = "removed_up"
    REMOVED_DOWN = "removed_down"
    MOVED_DOWN_TO_UP = "moved_down_to_up"
    MOVED_UP_TO_DOWN = "moved_up_to_down"


class Username(BoundedText):
    """Unique, human-readable user name of 1-64 characters once trimmed."""

    max_length = 64
    label = "Username"
