"""Vote sets carried by questions and answers."""

from typing import Optional

from pydantic import model_validator

from asklet.domain.model.common import DomainModel
from asklet.domain.value import UserId, VoteDirection


class Votes(DomainModel):
    """Upvoter and downvoter identities of a votable entity.

    A voter is in at most one of the two sets. The score is derived from
    the set sizes and never stored.
    """

    upvotes: frozenset[UserId] = frozenset()
    downvotes: frozenset[UserId] = frozenset()

    @model_validator(mode="after")
    def validate_disjoint(self) -> "Votes":
        """Reject voters present in both sets."""
        overlap = self.upvotes & self.downvotes
        if overlap:
            raise ValueError(
                f"Voters cannot both upvote and downvote: {sorted(map(str, overlap))}"
            )
        return self

    @property
    def score(self) -> int:
        """Upvote count minus downvote count."""
        return len(self.upvotes) - len(self.downvotes)

    def vote_of(self, user_id: UserId) -> Optional[VoteDirection]:
        """Return the user's current vote, if any."""
        if user_id in self.upvotes:
            return VoteDirection.UP
        if user_id in self.downvotes:
            return VoteDirection.DOWN
        return None
