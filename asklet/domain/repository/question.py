"""Question repository interface."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

from asklet.domain.model.question import Question
from asklet.domain.model.votes import Votes
from asklet.domain.value import QuestionId, TagName, UserId


class QuestionSortOrder(str, Enum):
    """Sort order for question listings."""

    NEWEST = "newest"  # created_at DESC
    OLDEST = "oldest"  # created_at ASC
    VIEWS = "views"  # views DESC
    VOTES = "votes"  # score DESC


class QuestionRepository(ABC):
    """Repository for Question aggregate.

    Defines the contract for question persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID.

        Args:
            question_id: The question's unique identifier

        Returns:
            The question if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        sort: QuestionSortOrder = QuestionSortOrder.NEWEST,
        search: Optional[str] = None,
        tag: Optional[TagName] = None,
        author_id: Optional[UserId] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Question]:
        """Find questions with filtering and pagination.

        Args:
            sort: Sort order
            search: Case-insensitive substring matched against title and
                description
            tag: Only questions filed under this tag
            author_id: Only questions by this author
            limit: Maximum number of questions to return
            offset: Number of questions to skip

        Returns:
            List of questions matching the criteria
        """
        pass

    @abstractmethod
    async def count(
        self,
        search: Optional[str] = None,
        tag: Optional[TagName] = None,
        author_id: Optional[UserId] = None,
    ) -> int:
        """Count questions matching the given filters."""
        pass

    @abstractmethod
    async def save(self, question: Question) -> Question:
        """Save a question (create or update).

        Vote sets and version are not written here; use ``update_votes``.

        Args:
            question: The question to save

        Returns:
            The saved question
        """
        pass

    @abstractmethod
    async def update_votes(
        self, question_id: QuestionId, votes: Votes, expected_version: int
    ) -> bool:
        """Write new vote sets if the stored version still matches.

        On success the stored version is incremented.

        Args:
            question_id: The question ID
            votes: Vote sets to store
            expected_version: Version the caller read before applying its vote

        Returns:
            True if the write was applied, False if the version had moved
        """
        pass

    @abstractmethod
    async def increment_views(self, question_id: QuestionId) -> None:
        """Atomically increment the view counter."""
        pass

    @abstractmethod
    async def delete(self, question_id: QuestionId) -> None:
        """Delete a question.

        Answers are not removed here; delete them through the answer
        repository first.
        """
        pass
