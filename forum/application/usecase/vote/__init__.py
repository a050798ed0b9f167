"""Vote use cases."""

from .vote_on_post import VoteOnPostRequest, VoteOnPostResponse, VoteOnPostUseCase

__all__ = [
    "VoteOnPostRequest",
    "VoteOnPostResponse",
    "VoteOnPostUseCase",
]
