"""Strongly typed identifiers for forum domain entities.

Using NewType keeps post, comment and user IDs from being mixed up
while staying plain UUIDs at runtime.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
PostId = NewType("PostId", UUID)
CommentId = NewType("CommentId", UUID)
