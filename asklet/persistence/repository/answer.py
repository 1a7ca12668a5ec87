"""PostgreSQL implementation of Answer repository."""

from typing import Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from asklet.domain.model import Answer, Votes
from asklet.domain.repository import AnswerRepository
from asklet.domain.value import AnswerId, QuestionId, UserId
from asklet.persistence.mappers import answer_to_dict, row_to_answer, votes_to_dict
from asklet.persistence.tables import answers_table


class PostgresAnswerRepository(AnswerRepository):
    """PostgreSQL implementation of AnswerRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        stmt = select(answers_table).where(answers_table.c.id == answer_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_answer(dict(row)) if row else None

    async def find_by_question(self, question_id: QuestionId) -> list[Answer]:
        """Find answers to a question, accepted first then oldest first."""
        stmt = (
            select(answers_table)
            .where(answers_table.c.question_id == question_id)
            .order_by(
                answers_table.c.is_accepted.desc(), answers_table.c.created_at.asc()
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_answer(dict(row)) for row in result.mappings().all()]

    async def find_accepted_by_question(self, question_id: QuestionId) -> list[Answer]:
        """Find answers to a question flagged as accepted."""
        stmt = (
            select(answers_table)
            .where(answers_table.c.question_id == question_id)
            .where(answers_table.c.is_accepted.is_(True))
        )
        result = await self.session.execute(stmt)
        return [row_to_answer(dict(row)) for row in result.mappings().all()]

    async def find_by_author(self, author_id: UserId, limit: int = 5) -> list[Answer]:
        """Find the most recent answers by an author."""
        stmt = (
            select(answers_table)
            .where(answers_table.c.author_id == author_id)
            .order_by(answers_table.c.created_at.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_answer(dict(row)) for row in result.mappings().all()]

    async def count_by_questions(
        self, question_ids: Sequence[QuestionId]
    ) -> dict[QuestionId, int]:
        """Count answers for several questions in one query."""
        if not question_ids:
            return {}
        stmt = (
            select(answers_table.c.question_id, func.count())
            .where(answers_table.c.question_id.in_(list(question_ids)))
            .group_by(answers_table.c.question_id)
        )
        result = await self.session.execute(stmt)
        return {QuestionId(row[0]): row[1] for row in result.all()}

    async def count_by_author(self, author_id: UserId, accepted_only: bool = False) -> int:
        """Count answers by an author."""
        stmt = (
            select(func.count())
            .select_from(answers_table)
            .where(answers_table.c.author_id == author_id)
        )
        if accepted_only:
            stmt = stmt.where(answers_table.c.is_accepted.is_(True))
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def save(self, answer: Answer) -> Answer:
        """Save an answer (create or update), leaving votes alone."""
        answer_dict = answer_to_dict(answer)

        existing = await self.session.execute(
            select(answers_table.c.id).where(answers_table.c.id == answer.id)
        )
        if existing.first():
            stmt = (
                answers_table.update()
                .where(answers_table.c.id == answer.id)
                .values(**answer_dict)
            )
        else:
            stmt = answers_table.insert().values(
                **answer_dict, **votes_to_dict(answer.votes), version=answer.version
            )
        await self.session.execute(stmt)
        await self.session.flush()
        return answer

    async def update_votes(
        self, answer_id: AnswerId, votes: Votes, expected_version: int
    ) -> bool:
        """Conditionally write vote arrays, bumping the version."""
        stmt = (
            answers_table.update()
            .where(answers_table.c.id == answer_id)
            .where(answers_table.c.version == expected_version)
            .values(**votes_to_dict(votes), version=answers_table.c.version + 1)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1

    async def delete(self, answer_id: AnswerId) -> None:
        """Delete an answer."""
        await self.session.execute(
            answers_table.delete().where(answers_table.c.id == answer_id)
        )
        await self.session.flush()

    async def delete_by_question(self, question_id: QuestionId) -> int:
        """Delete every answer to a question."""
        result = await self.session.execute(
            answers_table.delete().where(answers_table.c.question_id == question_id)
        )
        await self.session.flush()
        return result.rowcount
