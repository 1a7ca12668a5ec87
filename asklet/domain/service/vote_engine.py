"""Vote transition rules.

A vote is a toggle. Repeating a vote removes it, voting the opposite way
switches it. Each transition carries a reputation change for the author of
the voted item:

=====================  ============  ============
transition             question      answer
=====================  ============  ============
new upvote             +5            +10
upvote removed         -5            -10
new downvote           -2            -2
downvote removed       +2            +2
down -> up             +2 +5         +2 +10
up -> down             -5 -2         -10 -2
=====================  ============  ============
"""

from dataclasses import dataclass
from typing import Optional

from asklet.domain.error import (
    InvalidVotableTypeError,
    InvalidVoteDirectionError,
    SelfVoteForbiddenError,
)
from asklet.domain.model.votes import Votes
from asklet.domain.value import UserId, VotableType, VoteDirection

QUESTION_UPVOTE_REPUTATION = 5
ANSWER_UPVOTE_REPUTATION = 10
DOWNVOTE_REPUTATION = 2
ACCEPT_REPUTATION = 15


@dataclass(frozen=True)
class VoteOutcome:
    """Result of applying one vote to a set of votes."""

    votes: Votes
    reputation_delta: int
    action: str
    user_vote: Optional[VoteDirection]


def upvote_unit(votable_type: VotableType) -> int:
    """Reputation earned by one upvote on the given kind of item."""
    if votable_type == VotableType.QUESTION:
        return QUESTION_UPVOTE_REPUTATION
    if votable_type == VotableType.ANSWER:
        return ANSWER_UPVOTE_REPUTATION
    raise InvalidVotableTypeError(votable_type)


def apply_vote(
    votes: Votes,
    author_id: UserId,
    voter_id: UserId,
    direction: VoteDirection,
    votable_type: VotableType,
) -> VoteOutcome:
    """Apply a voter's vote to an item's vote sets.

    Args:
        votes: Current vote sets of the item
        author_id: Author of the item, who receives the reputation change
        voter_id: User casting the vote
        direction: Up or down
        votable_type: Question or answer

    Returns:
        New vote sets, signed reputation delta for the author, a human
        readable action and the voter's resulting vote

    Raises:
        SelfVoteForbiddenError: If the voter authored the item
        InvalidVoteDirectionError: If direction is not up or down
        InvalidVotableTypeError: If votable_type is not question or answer
    """
    unit = upvote_unit(votable_type)

    if voter_id == author_id:
        raise SelfVoteForbiddenError(votable_type.value)

    upvotes = set(votes.upvotes)
    downvotes = set(votes.downvotes)
    delta = 0

    if direction == VoteDirection.UP:
        if voter_id in upvotes:
            upvotes.discard(voter_id)
            delta -= unit
            action = "removed upvote"
        else:
            if voter_id in downvotes:
                downvotes.discard(voter_id)
                delta += DOWNVOTE_REPUTATION
            upvotes.add(voter_id)
            delta += unit
            action = "upvoted"
    elif direction == VoteDirection.DOWN:
        if voter_id in downvotes:
            downvotes.discard(voter_id)
            delta += DOWNVOTE_REPUTATION
            action = "removed downvote"
        else:
            if voter_id in upvotes:
                upvotes.discard(voter_id)
                delta -= unit
            downvotes.add(voter_id)
            delta -= DOWNVOTE_REPUTATION
            action = "downvoted"
    else:
        raise InvalidVoteDirectionError(direction)

    new_votes = Votes(upvotes=frozenset(upvotes), downvotes=frozenset(downvotes))
    return VoteOutcome(
        votes=new_votes,
        reputation_delta=delta,
        action=action,
        user_vote=new_votes.vote_of(voter_id),
    )
