"""Read models for the ranked feed."""

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.model.post import Post
from forum.domain.value import Username


class FeedEntry(DomainModel):
    """A ranked post joined with its author's username."""

    post: Post
    author_username: Username
    rank: float


class FeedPage(DomainModel):
    """One window of the ranked feed."""

    entries: list[FeedEntry]
    page: int = Field(ge=1)
    limit: int = Field(ge=1)
    total: int = Field(ge=0)  # Unfiltered post count
    next_page: int | None = None
