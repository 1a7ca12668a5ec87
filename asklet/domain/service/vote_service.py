"""Vote domain service."""

from dataclasses import dataclass
from typing import Optional, Union

import logfire

from asklet.config import VotingSettings
from asklet.domain.error import ConcurrentUpdateError, NotFoundError
from asklet.domain.model import Answer, Question, Votes
from asklet.domain.repository import AnswerRepository, QuestionRepository
from asklet.domain.value import (
    AnswerId,
    QuestionId,
    UserId,
    VotableType,
    VoteDirection,
)

from .base import Service
from .user_service import UserService
from .vote_engine import apply_vote, upvote_unit

VotableId = Union[QuestionId, AnswerId]


@dataclass
class VoteResult:
    """Vote tallies of an item as seen by one user."""

    vote_score: int
    upvotes: int
    downvotes: int
    user_vote: Optional[VoteDirection]
    action: Optional[str] = None

    @classmethod
    def from_votes(
        cls,
        votes: Votes,
        user_id: Optional[UserId],
        action: Optional[str] = None,
    ) -> "VoteResult":
        return cls(
            vote_score=votes.score,
            upvotes=len(votes.upvotes),
            downvotes=len(votes.downvotes),
            user_vote=votes.vote_of(user_id) if user_id else None,
            action=action,
        )


class VoteService(Service):
    """Domain service for vote operations.

    Each vote is a read, apply, conditional-write cycle against the item's
    version. When another writer got in between, the item is read again
    and the vote re-applied, up to ``VotingSettings.max_attempts`` times.
    """

    def __init__(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        user_service: UserService,
        voting_settings: VotingSettings,
    ) -> None:
        """Initialize vote service.

        Args:
            question_repository: Question repository
            answer_repository: Answer repository
            user_service: User domain service
            voting_settings: Vote write settings
        """
        self.question_repository = question_repository
        self.answer_repository = answer_repository
        self.user_service = user_service
        self.voting_settings = voting_settings

    async def _load(
        self, votable_type: VotableType, item_id: VotableId
    ) -> Union[Question, Answer]:
        upvote_unit(votable_type)  # rejects unknown types
        if votable_type == VotableType.QUESTION:
            item = await self.question_repository.find_by_id(QuestionId(item_id))
            name = "Question"
        else:
            item = await self.answer_repository.find_by_id(AnswerId(item_id))
            name = "Answer"
        if not item:
            logfire.warn(f"Vote on non-existent {votable_type.value}", item_id=str(item_id))
            raise NotFoundError(name, str(item_id))
        return item

    async def _write(
        self,
        votable_type: VotableType,
        item_id: VotableId,
        votes: Votes,
        expected_version: int,
    ) -> bool:
        if votable_type == VotableType.QUESTION:
            return await self.question_repository.update_votes(
                QuestionId(item_id), votes, expected_version
            )
        return await self.answer_repository.update_votes(
            AnswerId(item_id), votes, expected_version
        )

    async def cast_vote(
        self,
        votable_type: VotableType,
        item_id: VotableId,
        voter_id: UserId,
        direction: VoteDirection,
    ) -> VoteResult:
        """Toggle or switch a user's vote on a question or answer.

        The item's author gains or loses reputation according to the
        transition; no adjustment is made when the net change is zero.

        Args:
            votable_type: Question or answer
            item_id: ID of the item
            voter_id: Voting user
            direction: Up or down

        Returns:
            Updated tallies, the voter's resulting vote and the action taken

        Raises:
            NotFoundError: If the item does not exist
            SelfVoteForbiddenError: If the voter authored the item
            InvalidVoteDirectionError: If the direction is invalid
            ConcurrentUpdateError: If every write attempt lost a race
        """
        with logfire.span(
            "vote_service.cast_vote",
            votable_type=votable_type.value,
            item_id=str(item_id),
            voter_id=str(voter_id),
            direction=direction.value,
        ):
            max_attempts = self.voting_settings.max_attempts
            for attempt in range(1, max_attempts + 1):
                item = await self._load(votable_type, item_id)
                outcome = apply_vote(
                    item.votes, item.author_id, voter_id, direction, votable_type
                )

                written = await self._write(
                    votable_type, item_id, outcome.votes, item.version
                )
                if not written:
                    logfire.warn(
                        "Vote write lost to concurrent update",
                        item_id=str(item_id),
                        attempt=attempt,
                    )
                    continue

                if outcome.reputation_delta:
                    await self.user_service.adjust_reputation(
                        item.author_id, outcome.reputation_delta
                    )

                logfire.info(
                    "Vote applied",
                    item_id=str(item_id),
                    action=outcome.action,
                    reputation_delta=outcome.reputation_delta,
                )
                return VoteResult.from_votes(outcome.votes, voter_id, outcome.action)

            logfire.error(
                "Vote abandoned after repeated conflicts",
                item_id=str(item_id),
                attempts=max_attempts,
            )
            raise ConcurrentUpdateError(
                votable_type.value.capitalize(), str(item_id), max_attempts
            )

    async def get_vote_state(
        self,
        votable_type: VotableType,
        item_id: VotableId,
        user_id: Optional[UserId] = None,
    ) -> VoteResult:
        """Read the current tallies and, for a signed-in user, their vote.

        Raises:
            NotFoundError: If the item does not exist
        """
        with logfire.span(
            "vote_service.get_vote_state",
            votable_type=votable_type.value,
            item_id=str(item_id),
        ):
            item = await self._load(votable_type, item_id)
            return VoteResult.from_votes(item.votes, user_id)
