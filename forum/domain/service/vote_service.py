"""Vote domain service."""

from dataclasses import dataclass

import logfire

from forum.config import VoteSettings
from forum.domain.error import ConcurrentUpdateError, NotFoundError
from forum.domain.model import Post
from forum.domain.model.common import utcnow
from forum.domain.repository import PostRepository
from forum.domain.value import PostId, UserId, VoteDirection, VoteOutcome

from .base import Service


@dataclass(frozen=True)
class VoteResult:
    """A post as stored after a vote, and what the vote changed."""

    post: Post
    outcome: VoteOutcome
    attempts: int


class VoteService(Service):
    """Domain service for toggle voting on posts."""

    span_namespace = "vote_service"

    def __init__(
        self, post_repository: PostRepository, vote_settings: VoteSettings
    ) -> None:
        """Initialize vote service.

        Args:
            post_repository: Post repository
            vote_settings: Retry configuration for conflicting writes
        """
        self.post_repository = post_repository
        self.vote_settings = vote_settings

    async def cast_vote(
        self, post_id: PostId, user_id: UserId, direction: VoteDirection
    ) -> VoteResult:
        """Apply a toggle vote to a post.

        Reads the post, toggles the voter's membership, recomputes the
        score and writes ledger and score together, conditional on the
        version that was read. A lost race re-reads and re-applies the
        vote against the fresh state.

        Args:
            post_id: Post ID
            user_id: Voter's user ID
            direction: Vote direction

        Returns:
            Stored post and the membership change

        Raises:
            NotFoundError: If the post doesn't exist (or vanished mid-vote)
            ConcurrentUpdateError: If every attempt lost a race
        """
        with self._span(
            "cast_vote",
            post_id=str(post_id),
            user_id=str(user_id),
            direction=direction.value,
        ):
            max_attempts = self.vote_settings.max_attempts
            for attempt in range(1, max_attempts + 1):
                post = await self.post_repository.find_by_id(post_id)
                if post is None:
                    logfire.warn("Vote on non-existent post", post_id=str(post_id))
                    raise NotFoundError("Post", str(post_id))

                updated, outcome = post.apply_vote(user_id, direction, utcnow())
                saved = await self.post_repository.save_votes(updated)
                if saved is not None:
                    logfire.info(
                        "Vote applied",
                        post_id=str(post_id),
                        user_id=str(user_id),
                        outcome=outcome.value,
                        score=saved.score,
                        version=saved.version,
                        attempt=attempt,
                    )
                    return VoteResult(post=saved, outcome=outcome, attempts=attempt)

                logfire.warn(
                    "Vote lost a concurrent update, retrying",
                    post_id=str(post_id),
                    attempt=attempt,
                    read_version=post.version,
                )

            logfire.error(
                "Vote abandoned after repeated conflicts",
                post_id=str(post_id),
                attempts=max_attempts,
            )
            raise ConcurrentUpdateError(str(post_id), max_attempts)
