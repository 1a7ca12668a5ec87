"""Answer repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from asklet.domain.model.answer import Answer
from asklet.domain.model.votes import Votes
from asklet.domain.value import AnswerId, QuestionId, UserId


class AnswerRepository(ABC):
    """Repository for Answer entity.

    Defines the contract for answer persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID.

        Args:
            answer_id: The answer's unique identifier

        Returns:
            The answer if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_question(self, question_id: QuestionId) -> list[Answer]:
        """Find all answers to a question.

        Accepted answers come first, then the rest oldest first.

        Args:
            question_id: The question's ID

        Returns:
            List of answers to the question
        """
        pass

    @abstractmethod
    async def find_accepted_by_question(self, question_id: QuestionId) -> list[Answer]:
        """Find answers to a question currently flagged as accepted.

        Args:
            question_id: The question's ID

        Returns:
            Accepted answers (normally zero or one)
        """
        pass

    @abstractmethod
    async def find_by_author(self, author_id: UserId, limit: int = 5) -> list[Answer]:
        """Find the most recent answers by an author.

        Args:
            author_id: The author's user ID
            limit: Maximum number of answers to return

        Returns:
            Answers by the author, newest first
        """
        pass

    @abstractmethod
    async def count_by_questions(
        self, question_ids: Sequence[QuestionId]
    ) -> dict[QuestionId, int]:
        """Count answers for several questions in one query.

        Args:
            question_ids: Question identifiers

        Returns:
            Mapping of question ID to answer count (missing IDs have none)
        """
        pass

    @abstractmethod
    async def count_by_author(self, author_id: UserId, accepted_only: bool = False) -> int:
        """Count answers by an author.

        Args:
            author_id: The author's user ID
            accepted_only: Count only accepted answers

        Returns:
            Number of answers
        """
        pass

    @abstractmethod
    async def save(self, answer: Answer) -> Answer:
        """Save an answer (create or update).

        Vote sets and version are not written here; use ``update_votes``.

        Args:
            answer: The answer to save

        Returns:
            The saved answer
        """
        pass

    @abstractmethod
    async def update_votes(
        self, answer_id: AnswerId, votes: Votes, expected_version: int
    ) -> bool:
        """Write new vote sets if the stored version still matches.

        Args:
            answer_id: The answer ID
            votes: Vote sets to store
            expected_version: Version the caller read before applying its vote

        Returns:
            True if the write was applied, False if the version had moved
        """
        pass

    @abstractmethod
    async def delete(self, answer_id: AnswerId) -> None:
        """Delete an answer."""
        pass

    @abstractmethod
    async def delete_by_question(self, question_id: QuestionId) -> int:
        """Delete every answer to a question.

        Returns:
            Number of answers deleted
        """
        pass
