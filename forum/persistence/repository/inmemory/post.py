"""In-memory post repository for testing."""

from datetime import datetime
from typing import Optional

from forum.config import RankingSettings
from forum.domain.error import IntegrityViolationError
from forum.domain.model import FeedEntry, Post
from forum.domain.repository.post import PostRepository
from forum.domain.service.ranking import rank
from forum.domain.value import PostId

from .store import InMemoryDatabase


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(
        self,
        store: InMemoryDatabase | None = None,
        ranking: RankingSettings | None = None,
    ) -> None:
        self._store = store or InMemoryDatabase()
        self._ranking = ranking or RankingSettings()

    @property
    def _posts(self) -> dict[PostId, Post]:
        return self._store.posts

    def _with_comments(self, post: Post) -> Post:
        return post.replace(comments=self._store.comments_for(post.id))

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        post = self._posts.get(post_id)
        return self._with_comments(post) if post else None

    async def find_ranked(
        self,
        now: datetime,
        limit: int = 10,
        offset: int = 0,
    ) -> list[FeedEntry]:
        """Rank every post and slice out one page."""
        scored = [
            (
                rank(
                    post.score,
                    post.created_at,
                    now,
                    gravity=self._ranking.gravity,
                    time_offset=self._ranking.time_offset,
                ),
                post,
            )
            for post in self._posts.values()
        ]
        # Stable sort: equal ranks keep insertion order
        scored.sort(key=lambda pair: pair[0], reverse=True)

        entries = []
        for post_rank, post in scored[offset : offset + limit]:
            author = self._store.users.get(post.author_id)
            if author is None:
                raise IntegrityViolationError(
                    f"Author {post.author_id} of post {post.id} does not exist"
                )
            entries.append(
                FeedEntry(post=post, author_username=author.username, rank=post_rank)
            )
        return entries

    async def count(self) -> int:
        """Count all posts."""
        return len(self._posts)

    async def create(self, post: Post) -> Post:
        """Store a new post (comments live in the comment table)."""
        self._posts[post.id] = post.replace(comments=())
        return post

    async def update_content(
        self,
        post_id: PostId,
        title: str | None,
        content: str | None,
        updated_at: datetime,
    ) -> Optional[Post]:
        """Merge title and/or content into a post."""
        post = self._posts.get(post_id)
        if post is None:
            return None

        changes: dict = {"updated_at": updated_at}
        if title is not None:
            changes["title"] = title
        if content is not None:
            changes["content"] = content

        updated = post.replace(**changes)
        self._posts[post_id] = updated
        return self._with_comments(updated)

    async def save_votes(self, post: Post) -> Optional[Post]:
        """Compare-and-set on ``version``."""
        current = self._posts.get(post.id)
        if current is None or current.version != post.version:
            return None

        stored = current.replace(
            upvoters=post.upvoters,
            downvoters=post.downvoters,
            score=post.score,
            updated_at=post.updated_at,
            version=current.version + 1,
        )
        self._posts[post.id] = stored
        return self._with_comments(stored)

    async def touch(self, post_id: PostId, updated_at: datetime) -> None:
        """Refresh a post's modification timestamp."""
        post = self._posts.get(post_id)
        if post is not None:
            self._posts[post_id] = post.replace(updated_at=updated_at)

    async def delete(self, post_id: PostId) -> None:
        """Delete a post and its comments."""
        self._posts.pop(post_id, None)
        for comment_id in [
            c.id for c in self._store.comments.values() if c.post_id == post_id
        ]:
            del self._store.comments[comment_id]
