"""PostgreSQL implementation of Post repository."""

from datetime import datetime
from typing import Any, Dict, List, Optional

import logfire
from sqlalchemy import Float, cast, desc, func, literal, select, update
from sqlalchemy.dialects.postgresql import TIMESTAMP
from sqlalchemy.ext.asyncio import AsyncSession

from forum.config import RankingSettings
from forum.domain.error import IntegrityViolationError
from forum.domain.model import FeedEntry, Post
from forum.domain.repository.post import PostRepository
from forum.domain.value import PostId, Username
from forum.persistence.mappers import post_to_dict, row_to_comment, row_to_post
from forum.persistence.repository.base import SqlRepository
from forum.persistence.repository.comment import comments_of
from forum.persistence.tables import posts_table, users_table


class PostgresPostRepository(SqlRepository, PostRepository):
    """Post rows with their vote sets stored as UUID arrays.

    ``version`` is bumped on every vote write; ``save_votes`` only succeeds
    against the version it read.
    """

    def __init__(self, session: AsyncSession, ranking: RankingSettings) -> None:
        super().__init__(session)
        self.ranking = ranking

    async def _load(self, row: Dict[str, Any]) -> Post:
        """Build a Post from a row, loading its comments."""
        comments = await self._many(comments_of(row["id"]), row_to_comment)
        return row_to_post(row, comments=comments)

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            row = await self._first(
                select(posts_table).where(posts_table.c.id == post_id)
            )
            if row is None:
                logfire.warn("Post not found", post_id=str(post_id))
                return None

            return await self._load(row)

    async def find_ranked(
        self,
        now: datetime,
        limit: int = 10,
        offset: int = 0,
    ) -> List[FeedEntry]:
        """Rank all posts in SQL and return one page of them."""
        with logfire.span(
            "post_repository.find_ranked", limit=limit, offset=offset
        ):
            gravity = self.ranking.gravity
            time_offset = self.ranking.time_offset
            reference = literal(now, type_=TIMESTAMP(timezone=True))

            # Age in hours, clamped so future timestamps count as brand new
            age_hours = func.greatest(
                func.extract("epoch", reference - posts_table.c.created_at) / 3600,
                0,
            )
            rank = (cast(posts_table.c.score, Float) + 1) / func.pow(
                age_hours + time_offset, gravity
            )

            stmt = (
                select(
                    posts_table,
                    users_table.c.username.label("author_username"),
                    rank.label("rank"),
                )
                .select_from(
                    posts_table.outerjoin(
                        users_table, posts_table.c.author_id == users_table.c.id
                    )
                )
                .order_by(
                    desc("rank"), posts_table.c.created_at, posts_table.c.id
                )
                .limit(limit)
                .offset(offset)
            )

            rows = (await self.session.execute(stmt)).mappings().all()

            entries = []
            for row in rows:
                data = dict(row)
                if data["author_username"] is None:
                    logfire.error(
                        "Post author missing",
                        post_id=str(data["id"]),
                        author_id=str(data["author_id"]),
                    )
                    raise IntegrityViolationError(
                        f"Author {data['author_id']} of post {data['id']} does not exist"
                    )
                entries.append(
                    FeedEntry(
                        post=row_to_post(data),
                        author_username=Username(data["author_username"]),
                        rank=float(data["rank"]),
                    )
                )

            logfire.info("Ranked posts", count=len(entries))
            return entries

    async def count(self) -> int:
        """Count all posts."""
        with logfire.span("post_repository.count"):
            stmt = select(func.count()).select_from(posts_table)
            count = await self._scalar(stmt) or 0
            logfire.info("Post count", count=count)
            return count

    async def create(self, post: Post) -> Post:
        """Insert a new post."""
        with logfire.span(
            "post_repository.create", post_id=str(post.id), title=post.title
        ):
            await self._insert(posts_table, post_to_dict(post))
            logfire.info("Post inserted", post_id=str(post.id))
            return post

    async def update_content(
        self,
        post_id: PostId,
        title: str | None,
        content: str | None,
        updated_at: datetime,
    ) -> Optional[Post]:
        """Merge title and/or content into a post."""
        with logfire.span("post_repository.update_content", post_id=str(post_id)):
            values: Dict[str, Any] = {"updated_at": updated_at}
            if title is not None:
                values["title"] = title
            if content is not None:
                values["content"] = content

            stmt = (
                update(posts_table)
                .where(posts_table.c.id == post_id)
                .values(**values)
                .returning(posts_table)
            )
            row = await self._first(stmt)
            if row is None:
                logfire.warn("Post not found", post_id=str(post_id))
                return None

            await self.session.flush()
            return await self._load(row)

    async def save_votes(self, post: Post) -> Optional[Post]:
        """Write the vote sets if nobody else wrote them first."""
        with logfire.span(
            "post_repository.save_votes",
            post_id=str(post.id),
            version=post.version,
        ):
            data = post_to_dict(post)
            stmt = (
                update(posts_table)
                .where(posts_table.c.id == post.id)
                .where(posts_table.c.version == post.version)
                .values(
                    upvoters=data["upvoters"],
                    downvoters=data["downvoters"],
                    score=post.score,
                    updated_at=post.updated_at,
                    version=posts_table.c.version + 1,
                )
                .returning(posts_table)
            )
            row = await self._first(stmt)
            if row is None:
                logfire.warn("Stale vote write", post_id=str(post.id))
                return None

            await self.session.flush()
            return row_to_post(row, comments=post.comments)

    async def touch(self, post_id: PostId, updated_at: datetime) -> None:
        """Refresh a post's modification timestamp."""
        await self._write(
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(updated_at=updated_at)
        )

    async def delete(self, post_id: PostId) -> None:
        """Delete a post (comments go with it through the FK cascade)."""
        await self._write(posts_table.delete().where(posts_table.c.id == post_id))
