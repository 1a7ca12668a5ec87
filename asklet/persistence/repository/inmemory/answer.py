"""In-memory answer repository for testing."""

from typing import Optional, Sequence

from asklet.domain.model import Answer, Votes
from asklet.domain.repository.answer import AnswerRepository
from asklet.domain.value import AnswerId, QuestionId, UserId


class InMemoryAnswerRepository(AnswerRepository):
    """In-memory implementation of AnswerRepository for testing."""

    def __init__(self) -> None:
        self._answers: dict[AnswerId, Answer] = {}

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        return self._answers.get(answer_id)

    async def find_by_question(self, question_id: QuestionId) -> list[Answer]:
        """Find answers to a question, accepted first then oldest first."""
        answers = [a for a in self._answers.values() if a.question_id == question_id]
        answers.sort(key=lambda a: (not a.is_accepted, a.created_at))
        return answers

    async def find_accepted_by_question(self, question_id: QuestionId) -> list[Answer]:
        """Find answers to a question flagged as accepted."""
        return [
            a
            for a in self._answers.values()
            if a.question_id == question_id and a.is_accepted
        ]

    async def find_by_author(self, author_id: UserId, limit: int = 5) -> list[Answer]:
        """Find the most recent answers by an author."""
        answers = [a for a in self._answers.values() if a.author_id == author_id]
        answers.sort(key=lambda a: a.created_at, reverse=True)
        return answers[:limit]

    async def count_by_questions(
        self, question_ids: Sequence[QuestionId]
    ) -> dict[QuestionId, int]:
        """Count answers for several questions."""
        wanted = set(question_ids)
        counts: dict[QuestionId, int] = {}
        for answer in self._answers.values():
            if answer.question_id in wanted:
                counts[answer.question_id] = counts.get(answer.question_id, 0) + 1
        return counts

    async def count_by_author(self, author_id: UserId, accepted_only: bool = False) -> int:
        """Count answers by an author."""
        return sum(
            1
            for a in self._answers.values()
            if a.author_id == author_id and (a.is_accepted or not accepted_only)
        )

    async def save(self, answer: Answer) -> Answer:
        """Save an answer; stored votes and version win over the given ones."""
        existing = self._answers.get(answer.id)
        if existing:
            answer = answer.model_copy(
                update={"votes": existing.votes, "version": existing.version}
            )
        self._answers[answer.id] = answer
        return answer

    async def update_votes(
        self, answer_id: AnswerId, votes: Votes, expected_version: int
    ) -> bool:
        """Write vote sets if the stored version matches."""
        answer = self._answers.get(answer_id)
        if answer is None or answer.version != expected_version:
            return False
        self._answers[answer_id] = answer.model_copy(
            update={"votes": votes, "version": answer.version + 1}
        )
        return True

    async def delete(self, answer_id: AnswerId) -> None:
        """Delete an answer."""
        self._answers.pop(answer_id, None)

    async def delete_by_question(self, question_id: QuestionId) -> int:
        """Delete every answer to a question."""
        doomed = [a.id for a in self._answers.values() if a.question_id == question_id]
        for answer_id in doomed:
            del self._answers[answer_id]
        return len(doomed)
