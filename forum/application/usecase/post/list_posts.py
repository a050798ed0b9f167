"""List posts use case (the ranked feed)."""

from typing import Annotated

import logfire
from pydantic import BaseModel, BeforeValidator

from forum.application.usecase.common import (
    ResponseModel,
    excerpt,
    format_created,
    format_updated,
)
from forum.config import FeedSettings
from forum.domain.error import ValidationError
from forum.domain.service import FeedService


class FeedAuthor(ResponseModel):
    """Author as shown in the feed."""

    username: str


class PostListItem(ResponseModel):
    """Post list item in response."""

    id: str
    title: str
    author: FeedAuthor
    content: str | None  # Excerpt
    score: int
    upvotes: list[str]
    downvotes: list[str]
    created_at: str
    updated_at: str


def _blank_as_missing(value: object) -> object:
    if isinstance(value, str) and not value.strip():
        return None
    return value


# `?page=` counts as no page at all
OptionalCount = Annotated[int | None, BeforeValidator(_blank_as_missing)]


class ListPostsRequest(BaseModel):
    """List posts request; missing or blank values use the configured defaults."""

    page: OptionalCount = None
    limit: OptionalCount = None


class ListPostsResponse(ResponseModel):
    """List posts response."""

    posts: list[PostListItem]
    next_page: int | None


class ListPostsUseCase:
    """Use case for reading one page of the ranked feed."""

    def __init__(self, feed_service: FeedService, feed_settings: FeedSettings) -> None:
        """Initialize list posts use case.

        Args:
            feed_service: Feed domain service
            feed_settings: Pagination defaults and limits
        """
        self.feed_service = feed_service
        self.feed_settings = feed_settings

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Args:
            request: Page number and size

        Returns:
            Ranked posts and the next page number (None at the end)

        Raises:
            ValidationError: If page or limit is out of range
        """
        settings = self.feed_settings
        page = settings.default_page if request.page is None else request.page
        limit = settings.default_limit if request.limit is None else request.limit
        if page < 1 or limit < 1:
            raise ValidationError("Limit and page have to be positive numbers")
        if limit > settings.max_limit:
            raise ValidationError(f"Limit must be at most {settings.max_limit}")

        with logfire.span("list_posts.execute", page=page, limit=limit):
            feed_page = await self.feed_service.get_page(page=page, limit=limit)

            items = [
                PostListItem(
                    id=str(entry.post.id),
                    title=entry.post.title.upper(),
                    author=FeedAuthor(username=entry.author_username.root),
                    content=excerpt(entry.post.content, settings.excerpt_length),
                    score=entry.post.score,
                    upvotes=sorted(str(u) for u in entry.post.upvoters),
                    downvotes=sorted(str(u) for u in entry.post.downvoters),
                    created_at=format_created(entry.post.created_at),
                    updated_at=format_updated(entry.post.updated_at),
                )
                for entry in feed_page.entries
            ]

            logfire.info(
                "Posts listed",
                count=len(items),
                total=feed_page.total,
                next_page=feed_page.next_page,
            )
            return ListPostsResponse(posts=items, next_page=feed_page.next_page)
