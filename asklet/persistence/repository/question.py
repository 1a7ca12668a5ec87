"""PostgreSQL implementation of Question repository."""

from typing import Optional

import logfire
from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from asklet.domain.model import Question, Votes
from asklet.domain.repository.question import QuestionRepository, QuestionSortOrder
from asklet.domain.value import QuestionId, TagName, UserId
from asklet.persistence.mappers import question_to_dict, row_to_question, votes_to_dict
from asklet.persistence.tables import questions_table


class PostgresQuestionRepository(QuestionRepository):
    """PostgreSQL implementation of QuestionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @staticmethod
    def _filters(
        search: Optional[str], tag: Optional[TagName], author_id: Optional[UserId]
    ) -> list:
        conditions = []
        if search:
            conditions.append(
                or_(
                    questions_table.c.title.icontains(search, autoescape=True),
                    questions_table.c.description.icontains(search, autoescape=True),
                )
            )
        if tag:
            conditions.append(questions_table.c.tags.any(tag.root))
        if author_id:
            conditions.append(questions_table.c.author_id == author_id)
        return conditions

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        stmt = select(questions_table).where(questions_table.c.id == question_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_question(dict(row)) if row else None

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
        with logfire.span(
            "question_repository.find_all", sort=sort.value, limit=limit, offset=offset
        ):
            stmt = select(questions_table).where(*self._filters(search, tag, author_id))

            if sort == QuestionSortOrder.OLDEST:
                stmt = stmt.order_by(questions_table.c.created_at.asc())
            elif sort == QuestionSortOrder.VIEWS:
                stmt = stmt.order_by(
                    questions_table.c.views.desc(), questions_table.c.created_at.desc()
                )
            elif sort == QuestionSortOrder.VOTES:
                score = func.cardinality(questions_table.c.upvotes) - func.cardinality(
                    questions_table.c.downvotes
                )
                stmt = stmt.order_by(score.desc(), questions_table.c.created_at.desc())
            else:
                stmt = stmt.order_by(questions_table.c.created_at.desc())

            stmt = stmt.limit(limit).offset(offset)
            result = await self.session.execute(stmt)
            return [row_to_question(dict(row)) for row in result.mappings().all()]

    async def count(
        self,
        search: Optional[str] = None,
        tag: Optional[TagName] = None,
        author_id: Optional[UserId] = None,
    ) -> int:
        """Count questions matching the given filters."""
        stmt = (
            select(func.count())
            .select_from(questions_table)
            .where(*self._filters(search, tag, author_id))
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def save(self, question: Question) -> Question:
        """Save a question (create or update), leaving votes and views alone."""
        question_dict = question_to_dict(question)

        existing = await self.session.execute(
            select(questions_table.c.id).where(questions_table.c.id == question.id)
        )
        if existing.first():
            stmt = (
                questions_table.update()
                .where(questions_table.c.id == question.id)
                .values(**question_dict)
            )
        else:
            stmt = questions_table.insert().values(
                **question_dict,
                **votes_to_dict(question.votes),
                views=question.views,
                version=question.version,
            )
        await self.session.execute(stmt)
        await self.session.flush()
        return question

    async def update_votes(
        self, question_id: QuestionId, votes: Votes, expected_version: int
    ) -> bool:
        """Conditionally write vote arrays, bumping the version."""
        stmt = (
            questions_table.update()
            .where(questions_table.c.id == question_id)
            .where(questions_table.c.version == expected_version)
            .values(**votes_to_dict(votes), version=questions_table.c.version + 1)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1

    async def increment_views(self, question_id: QuestionId) -> None:
        """Atomically increment the view counter."""
        stmt = (
            questions_table.update()
            .where(questions_table.c.id == question_id)
            .values(views=questions_table.c.views + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete(self, question_id: QuestionId) -> None:
        """Delete a question."""
        await self.session.execute(
            questions_table.delete().where(questions_table.c.id == question_id)
        )
        await self.session.flush()
