"""Domain value objects for the forum."""

from forum.domain.value.identifiers import CommentId, PostId, UserId
from forum.domain.value.ledger import VoteLedger, recompute_score
from forum.domain.value.types import Username, VoteDirection, VoteOutcome

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    # Types
    "Username",
    "VoteDirection",
    "VoteOutcome",
    # Votes
    "VoteLedger",
    "recompute_score",
]
