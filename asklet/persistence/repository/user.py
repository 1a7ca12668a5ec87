"""PostgreSQL implementation of User repository."""

from typing import Optional, Sequence

from sqlalchemy import Select, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from asklet.domain.model import User
from asklet.domain.repository import UserRepository
from asklet.domain.value import UserId, Username
from asklet.persistence.mappers import row_to_user, user_to_dict
from asklet.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _first(self, stmt: Select) -> Optional[User]:
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return await self._first(select(users_table).where(users_table.c.id == user_id))

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        if not user_ids:
            return []
        stmt = select(users_table).where(users_table.c.id.in_(set(user_ids)))
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings()]

    async def find_by_username(self, username: Username) -> Optional[User]:
        return await self._first(
            select(users_table).where(users_table.c.username == username.root)
        )

    async def find_by_email(self, email: str) -> Optional[User]:
        return await self._first(select(users_table).where(users_table.c.email == email))

    async def save(self, user: User) -> User:
        """Upsert account fields; an existing row keeps its reputation."""
        values = user_to_dict(user)
        stmt = insert(users_table).values(**values, reputation=user.reputation)
        stmt = stmt.on_conflict_do_update(
            index_elements=[users_table.c.id],
            set_={key: stmt.excluded[key] for key in values if key != "id"},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return user

    async def adjust_reputation(self, user_id: UserId, delta: int) -> None:
        """Relative update, so concurrent deltas accumulate."""
        stmt = (
            users_table.update()
            .where(users_table.c.id == user_id)
            .values(reputation=users_table.c.reputation + delta)
        )
        await self.session.execute(stmt)
        await self.session.flush()
