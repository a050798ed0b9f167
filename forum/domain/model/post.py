"""Post aggregate root.

A post owns its comments and its vote ledger. The score stored alongside
the ledger is derived, never set on its own: every vote goes through
``Post.apply_vote``, which recomputes it in the same step.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator, model_validator

from forum.domain.model.comment import Comment
from forum.domain.model.common import DomainModel, utcnow
from forum.domain.value import (
    CommentId,
    PostId,
    UserId,
    VoteDirection,
    VoteLedger,
    VoteOutcome,
    recompute_score,
)


class Post(DomainModel):
    """Post aggregate root.

    Invariants:
    - no user is in both ``upvoters`` and ``downvoters``
    - ``score == len(upvoters) - len(downvoters)``
    """

    id: PostId
    title: str = Field(min_length=1, max_length=300)
    content: Optional[str] = Field(default=None, max_length=10000)
    author_id: UserId
    upvoters: frozenset[UserId] = frozenset()
    downvoters: frozenset[UserId] = frozenset()
    score: int = 0
    comments: tuple[Comment, ...] = ()
    version: int = Field(default=0, ge=0)  # Bumped by every persisted vote
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, v: object) -> object:
        """Titles are stored trimmed."""
        return v.strip() if isinstance(v, str) else v

    @model_validator(mode="after")
    def validate_vote_ledger(self) -> "Post":
        """Check vote exclusivity and score consistency."""
        # VoteLedger raises on overlapping voters
        ledger = self.ledger
        if self.score != ledger.score:
            raise ValueError(
                f"Score {self.score} does not match vote sets "
                f"({len(self.upvoters)} up, {len(self.downvoters)} down)"
            )
        return self

    @property
    def ledger(self) -> VoteLedger:
        return VoteLedger(upvoters=self.upvoters, downvoters=self.downvoters)

    def apply_vote(
        self,
        voter_id: UserId,
        direction: VoteDirection,
        now: datetime | None = None,
    ) -> tuple["Post", VoteOutcome]:
        """Toggle ``voter_id``'s vote and recompute the score.

        Self-votes are allowed. The returned post keeps the same
        ``version``; the repository bumps it when the write succeeds.
        """
        ledger, outcome = self.ledger.toggle(voter_id, direction)
        updated = self.replace(
            upvoters=ledger.upvoters,
            downvoters=ledger.downvoters,
            score=recompute_score(ledger.upvoters, ledger.downvoters),
            updated_at=now or utcnow(),
        )
        return updated, outcome

    def find_comment(self, comment_id: CommentId) -> Comment | None:
        """Linear scan of the comment sequence."""
        for comment in self.comments:
            if comment.id == comment_id:
                return comment
        return None

    def is_authored_by(self, user_id: UserId) -> bool:
        return self.author_id == user_id
