"""PostgreSQL implementation of Tag repository."""

from typing import Optional, Sequence

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from asklet.domain.model.tag import Tag
from asklet.domain.repository.tag import TagRepository, TagSortOrder
from asklet.domain.value import TagName
from asklet.persistence.mappers import row_to_tag
from asklet.persistence.tables import tags_table


class PostgresTagRepository(TagRepository):
    """PostgreSQL implementation of TagRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Find tag by name."""
        stmt = select(tags_table).where(tags_table.c.name == name.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_tag(dict(row)) if row else None

    async def find_all(
        self,
        search: Optional[str] = None,
        sort: TagSortOrder = TagSortOrder.POPULAR,
        limit: int = 50,
    ) -> list[Tag]:
        """Find tags."""
        stmt = select(tags_table)
        if search:
            stmt = stmt.where(tags_table.c.name.icontains(search, autoescape=True))

        if sort == TagSortOrder.ALPHABETICAL:
            stmt = stmt.order_by(tags_table.c.name.asc())
        elif sort == TagSortOrder.NEWEST:
            stmt = stmt.order_by(tags_table.c.created_at.desc())
        else:
            stmt = stmt.order_by(
                tags_table.c.question_count.desc(), tags_table.c.name.asc()
            )

        result = await self.session.execute(stmt.limit(limit))
        return [row_to_tag(dict(row)) for row in result.mappings().all()]

    async def increment_usage(self, names: Sequence[TagName]) -> None:
        """Upsert each tag and bump its question count."""
        for name in names:
            stmt = insert(tags_table).values(name=name.root, question_count=1)
            stmt = stmt.on_conflict_do_update(
                index_elements=[tags_table.c.name],
                set_={"question_count": tags_table.c.question_count + 1},
            )
            await self.session.execute(stmt)
        await self.session.flush()
