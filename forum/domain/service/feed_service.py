"""Feed domain service."""

from datetime import datetime

import logfire

from forum.domain.error import ValidationError
from forum.domain.model import FeedPage
from forum.domain.model.common import utcnow
from forum.domain.repository import PostRepository

from .base import Service
from .ranking import next_page


class FeedService(Service):
    """Ranked, paginated view over every post."""

    span_namespace = "feed_service"

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize feed service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def get_page(
        self, page: int, limit: int, now: datetime | None = None
    ) -> FeedPage:
        """Rank all posts and return one page.

        Args:
            page: 1-based page number
            limit: Page size
            now: Reference time for ranking (defaults to now)

        Returns:
            The page, with ``next_page`` set to None on the last page
        """
        if page < 1 or limit < 1:
            raise ValidationError("Page and limit must be at least 1")

        now = now or utcnow()
        offset = limit * (page - 1)
        with self._span("get_page", page=page, limit=limit):
            total = await self.post_repository.count()
            # Past the end: OFFSET may not even fit in a BIGINT
            entries = (
                await self.post_repository.find_ranked(
                    now=now, limit=limit, offset=offset
                )
                if offset < total
                else []
            )

            feed_page = FeedPage(
                entries=entries,
                page=page,
                limit=limit,
                total=total,
                next_page=next_page(page, limit, total),
            )
            logfire.info(
                "Feed page built",
                page=page,
                count=len(entries),
                total=total,
                next_page=feed_page.next_page,
            )
            return feed_page
