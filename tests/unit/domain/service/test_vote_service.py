"""Unit tests for VoteService."""

from uuid import uuid4

import pytest

from forum.config import VoteSettings
from forum.domain.error import ConcurrentUpdateError, NotFoundError
from forum.domain.repository import PostRepository
from forum.domain.service import VoteService
from forum.domain.value import PostId, UserId, VoteDirection, VoteOutcome
from forum.persistence.repository.inmemory import InMemoryPostRepository
from tests.conftest import make_post
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class AlwaysStalePostRepository(InMemoryPostRepository):
    """Post repository whose conditional write always loses the race."""

    def __init__(self) -> None:
        super().__init__()
        self.save_attempts = 0

    async def save_votes(self, post):
        self.save_attempts += 1
        return None


class StaleOncePostRepository(InMemoryPostRepository):
    """Another writer sneaks in a vote before the first save."""

    def __init__(self, rival: UserId) -> None:
        super().__init__()
        self.rival = rival
        self.raced = False

    async def save_votes(self, post):
        if not self.raced:
            self.raced = True
            current = await self.find_by_id(post.id)
            rival_post, _ = current.apply_vote(self.rival, VoteDirection.UP)
            await super().save_votes(rival_post)
        return await super().save_votes(post)


class TestCastVote:
    """Tests for VoteService.cast_vote."""

    @pytest.mark.asyncio
    async def test_upvote_records_vote_and_bumps_version(self, unit_env):
        """Upvoting a post adds the voter and increments the version."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.create(make_post(UserId(uuid4())))
        voter = UserId(uuid4())

        # Act
        result = await vote_service.cast_vote(post.id, voter, VoteDirection.UP)

        # Assert
        assert result.outcome is VoteOutcome.ADDED_UP
        assert result.attempts == 1
        assert result.post.score == 1
        assert result.post.version == post.version + 1

        stored = await post_repo.find_by_id(post.id)
        assert stored.upvoters == {voter}
        assert stored.score == 1

    @pytest.mark.asyncio
    async def test_upvote_then_downvote_moves_vote(self, unit_env):
        """A up then A down leaves A in downvoters only with score -1."""
        vote_service = await unit_env.get(VoteService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.create(make_post(UserId(uuid4())))
        voter = UserId(uuid4())

        await vote_service.cast_vote(post.id, voter, VoteDirection.UP)
        result = await vote_service.cast_vote(post.id, voter, VoteDirection.DOWN)

        assert result.outcome is VoteOutcome.MOVED_UP_TO_DOWN
        stored = await post_repo.find_by_id(post.id)
        assert stored.upvoters == frozenset()
        assert stored.downvoters == {voter}
        assert stored.score == -1

    @pytest.mark.asyncio
    async def test_double_upvote_retracts(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.create(make_post(UserId(uuid4())))
        voter = UserId(uuid4())

        await vote_service.cast_vote(post.id, voter, VoteDirection.UP)
        result = await vote_service.cast_vote(post.id, voter, VoteDirection.UP)

        assert result.outcome is VoteOutcome.REMOVED_UP
        assert result.post.score == 0
        assert result.post.upvoters == frozenset()

    @pytest.mark.asyncio
    async def test_score_tracks_many_voters(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.create(make_post(UserId(uuid4())))

        for _ in range(3):
            await vote_service.cast_vote(post.id, UserId(uuid4()), VoteDirection.UP)
        result = await vote_service.cast_vote(
            post.id, UserId(uuid4()), VoteDirection.DOWN
        )

        assert result.post.score == 2
        assert len(result.post.upvoters) == 3
        assert len(result.post.downvoters) == 1

    @pytest.mark.asyncio
    async def test_vote_on_missing_post_raises(self, unit_env):
        vote_service = await unit_env.get(VoteService)

        with pytest.raises(NotFoundError):
            await vote_service.cast_vote(
                PostId(uuid4()), UserId(uuid4()), VoteDirection.UP
            )


class TestConcurrentVotes:
    """Tests for optimistic concurrency handling."""

    @pytest.mark.asyncio
    async def test_gives_up_after_max_attempts(self):
        """A write that never succeeds raises after the configured attempts."""
        repo = AlwaysStalePostRepository()
        post = await repo.create(make_post(UserId(uuid4())))
        vote_service = VoteService(repo, VoteSettings(max_attempts=3))

        with pytest.raises(ConcurrentUpdateError) as exc_info:
            await vote_service.cast_vote(post.id, UserId(uuid4()), VoteDirection.UP)

        assert exc_info.value.attempts == 3
        assert repo.save_attempts == 3

    @pytest.mark.asyncio
    async def test_lost_race_is_reapplied_on_fresh_state(self):
        """Neither of two racing votes is lost."""
        rival = UserId(uuid4())
        voter = UserId(uuid4())
        repo = StaleOncePostRepository(rival)
        post = await repo.create(make_post(UserId(uuid4())))
        vote_service = VoteService(repo, VoteSettings())

        result = await vote_service.cast_vote(post.id, voter, VoteDirection.UP)

        assert result.attempts == 2
        assert result.post.upvoters == {rival, voter}
        assert result.post.score == 2
        assert result.post.version == 2
