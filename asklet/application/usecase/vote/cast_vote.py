"""Cast vote use case."""

from uuid import UUID

from pydantic import BaseModel

from asklet.application.usecase.base import BaseUseCase, CamelModel
from asklet.domain.error import (
    InvalidVotableTypeError,
    InvalidVoteDirectionError,
    ValidationError,
)
from asklet.domain.service import VoteService
from asklet.domain.value import UserId, VotableType, VoteDirection

MISSING_FIELDS_MESSAGE = (
    "itemId, itemType (question/answer), and voteType (up/down) required"
)


def parse_vote_target(item_id: str, item_type: str) -> tuple[VotableType, UUID]:
    """Parse the item type and ID of a vote target.

    Raises:
        InvalidVotableTypeError: If the type is not question or answer
        ValidationError: If the ID is not a UUID
    """
    try:
        votable_type = VotableType(item_type)
    except ValueError:
        raise InvalidVotableTypeError(item_type)
    try:
        votable_id = UUID(item_id)
    except ValueError:
        raise ValidationError(f"Invalid itemId: {item_id}")
    return votable_type, votable_id


class CastVoteRequest(BaseModel):
    """Cast vote request.

    Fields stay raw strings so that missing or unknown values are reported
    as domain validation errors.
    """

    item_id: str | None = None
    item_type: str | None = None
    vote_type: str | None = None
    user_id: str  # User ID from authenticated user


class CastVoteResponse(CamelModel):
    """Cast vote response."""

    message: str
    vote_score: int
    upvotes: int
    downvotes: int
    user_vote: VoteDirection | None


class CastVoteUseCase(BaseUseCase):
    """Use case for voting on a question or answer."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            Updated tallies and the caller's resulting vote

        Raises:
            ValidationError: If input is missing or malformed, or on self-votes
            NotFoundError: If the item does not exist
            ConcurrentUpdateError: If the vote kept conflicting with others
        """
        if not request.item_id or not request.item_type or not request.vote_type:
            raise ValidationError(MISSING_FIELDS_MESSAGE)

        votable_type, votable_id = parse_vote_target(request.item_id, request.item_type)
        try:
            direction = VoteDirection(request.vote_type)
        except ValueError:
            raise InvalidVoteDirectionError(request.vote_type)

        result = await self.vote_service.cast_vote(
            votable_type=votable_type,
            item_id=votable_id,
            voter_id=UserId(UUID(request.user_id)),
            direction=direction,
        )
        return CastVoteResponse(
            message=f"Successfully {result.action}",
            vote_score=result.vote_score,
            upvotes=result.upvotes,
            downvotes=result.downvotes,
            user_vote=result.user_vote,
        )
