"""Vote use cases."""

from .cast_vote import CastVoteRequest, CastVoteResponse, CastVoteUseCase
from .get_vote_state import GetVoteStateRequest, GetVoteStateUseCase, VoteStateResponse

__all__ = [
    "CastVoteRequest",
    "CastVoteResponse",
    "CastVoteUseCase",
    "GetVoteStateRequest",
    "GetVoteStateUseCase",
    "VoteStateResponse",
]
