"""Vote ledger value object.

A post's votes are kept as two sets of voter identities rather than a
counter: retracting a vote or switching its direction needs to know what
the voter did before.
"""

from pydantic import model_validator

from forum.domain.value.common import ValueObject
from forum.domain.value.identifiers import UserId
from forum.domain.value.types import VoteDirection, VoteOutcome


def recompute_score(
    upvoters: frozenset[UserId], downvoters: frozenset[UserId]
) -> int:
    """Derive the net score of a post from its vote sets."""
    return len(upvoters) - len(downvoters)


class VoteLedger(ValueObject):
    """Upvoters and downvoters of a single post.

    A user identity appears in at most one of the two sets.
    """

    upvoters: frozenset[UserId] = frozenset()
    downvoters: frozenset[UserId] = frozenset()

    @model_validator(mode="after")
    def validate_exclusive(self) -> "VoteLedger":
        """Reject ledgers where someone voted both ways."""
        both = self.upvoters & self.downvoters
        if both:
            raise ValueError(
                f"Voters present in both upvoters and downvoters: "
                f"{sorted(str(v) for v in both)}"
            )
        return self

    @property
    def score(self) -> int:
        return recompute_score(self.upvoters, self.downvoters)

    def direction_of(self, voter_id: UserId) -> VoteDirection | None:
        """Return the voter's current vote, if any."""
        if voter_id in self.upvoters:
            return VoteDirection.UP
        if voter_id in self.downvoters:
            return VoteDirection.DOWN
        return None

    def toggle(
        self, voter_id: UserId, direction: VoteDirection
    ) -> tuple["VoteLedger", VoteOutcome]:
        """Apply a toggle vote and return the new ledger plus what changed.

        1. Same direction as the existing vote: retract it and stop.
        2. Opposite existing vote: remove it.
        3. Record the vote in ``direction``.
        """
        current = self.direction_of(voter_id)

        if current is direction:
            if direction is VoteDirection.UP:
                return (
                    VoteLedger(
                        upvoters=self.upvoters - {voter_id},
                        downvoters=self.downvoters,
                    ),
                    VoteOutcome.REMOVED_UP,
                )
            return (
                VoteLedger(
                    upvoters=self.upvoters,
                    downvoters=self.downvoters - {voter_id},
                ),
                VoteOutcome.REMOVED_DOWN,
            )

        if direction is VoteDirection.UP:
            ledger = VoteLedger(
                upvoters=self.upvoters | {voter_id},
                downvoters=self.downvoters - {voter_id},
            )
            outcome = (
                VoteOutcome.MOVED_DOWN_TO_UP
                if current is VoteDirection.DOWN
                else VoteOutcome.ADDED_UP
            )
        else:
            ledger = VoteLedger(
                upvoters=self.upvoters - {voter_id},
                downvoters=self.downvoters | {voter_id},
            )
            outcome = (
                VoteOutcome.MOVED_UP_TO_DOWN
                if current is VoteDirection.UP
                else VoteOutcome.ADDED_DOWN
            )

        return ledger, outcome
