"""In-memory question repository for testing."""

from typing import Optional

from asklet.domain.model import Question, Votes
from asklet.domain.repository.question import QuestionRepository, QuestionSortOrder
from asklet.domain.value import QuestionId, TagName, UserId


class InMemoryQuestionRepository(QuestionRepository):
    """In-memory implementation of QuestionRepository for testing."""

    def __init__(self) -> None:
        self._questions: dict[QuestionId, Question] = {}

    def _matching(
        self,
        search: Optional[str],
        tag: Optional[TagName],
        author_id: Optional[UserId],
    ) -> list[Question]:
        questions = list(self._questions.values())
        if search:
            needle = search.lower()
            questions = [
                q
                for q in questions
                if needle in q.title.lower() or needle in q.description.lower()
            ]
        if tag:
            questions = [q for q in questions if tag in q.tags]
        if author_id:
            questions = [q for q in questions if q.author_id == author_id]
        return questions

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        return self._questions.get(question_id)

    async def find_all(
        self,
        sort: QuestionSortOrder = QuestionSortOrder.NEWEST,
        search: Optional[str] = None,
        tag: Optional[TagName] = None,
        author_id: Optional[UserId] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Question]:
        """Find questions with filtering and pagination."""
        questions = self._matching(search, tag, author_id)

        if sort == QuestionSortOrder.OLDEST:
            questions.sort(key=lambda q: q.created_at)
        elif sort == QuestionSortOrder.VIEWS:
            questions.sort(key=lambda q: (q.views, q.created_at), reverse=True)
        elif sort == QuestionSortOrder.VOTES:
            questions.sort(key=lambda q: (q.votes.score, q.created_at), reverse=True)
        else:
            questions.sort(key=lambda q: q.created_at, reverse=True)

        return questions[offset : offset + limit]

    async def count(
        self,
        search: Optional[str] = None,
        tag: Optional[TagName] = None,
        author_id: Optional[UserId] = None,
    ) -> int:
        """Count questions matching the given filters."""
        return len(self._matching(search, tag, author_id))

    async def save(self, question: Question) -> Question:
        """Save a question; stored votes, views and version win over the given ones."""
        existing = self._questions.get(question.id)
        if existing:
            question = question.model_copy(
                update={
                    "votes": existing.votes,
                    "views": existing.views,
                    "version": existing.version,
                }
            )
        self._questions[question.id] = question
        return question

    async def update_votes(
        self, question_id: QuestionId, votes: Votes, expected_version: int
    ) -> bool:
        """Write vote sets if the stored version matches."""
        question = self._questions.get(question_id)
        if question is None or question.version != expected_version:
            return False
        self._questions[question_id] = question.model_copy(
            update={"votes": votes, "version": question.version + 1}
        )
        return True

    async def increment_views(self, question_id: QuestionId) -> None:
        """Increment the view counter."""
        question = self._questions.get(question_id)
        if question:
            self._questions[question_id] = question.model_copy(
                update={"views": question.views + 1}
            )

    async def delete(self, question_id: QuestionId) -> None:
        """Delete a question."""
        self._questions.pop(question_id, None)
