"""Get vote state use case."""

from uuid import UUID

from pydantic import BaseModel

from asklet.application.usecase.base import BaseUseCase, CamelModel
from asklet.domain.error import ValidationError
from asklet.domain.service import VoteService
from asklet.domain.value import UserId, VoteDirection

from .cast_vote import parse_vote_target


class GetVoteStateRequest(BaseModel):
    """Get vote state request."""

    item_id: str | None = None
    item_type: str | None = None
    user_id: str | None = None  # Current user ID (if authenticated)


class VoteStateResponse(CamelModel):
    """Vote tallies of an item and the caller's vote."""

    vote_score: int
    upvotes: int
    downvotes: int
    user_vote: VoteDirection | None


class GetVoteStateUseCase(BaseUseCase):
    """Use case for reading vote tallies without voting."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize get vote state use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: GetVoteStateRequest) -> VoteStateResponse:
        """Execute get vote state flow.

        Raises:
            ValidationError: If item ID or type is missing or malformed
            NotFoundError: If the item does not exist
        """
        if not request.item_id or not request.item_type:
            raise ValidationError("itemId and itemType (question/answer) required")

        votable_type, votable_id = parse_vote_target(request.item_id, request.item_type)
        user_id = UserId(UUID(request.user_id)) if request.user_id else None

        state = await self.vote_service.get_vote_state(votable_type, votable_id, user_id)
        return VoteStateResponse(
            vote_score=state.vote_score,
            upvotes=state.upvotes,
            downvotes=state.downvotes,
            user_vote=state.user_vote,
        )
