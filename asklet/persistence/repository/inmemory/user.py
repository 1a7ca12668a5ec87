"""In-memory user repository for testing."""

from typing import Optional, Sequence

from asklet.domain.model.user import User
from asklet.domain.repository.user import UserRepository
from asklet.domain.value import UserId, Username


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find multiple users."""
        return [self._users[uid] for uid in user_ids if uid in self._users]

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username."""
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email."""
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def save(self, user: User) -> User:
        """Save or update a user, keeping the stored reputation."""
        existing = self._users.get(user.id)
        if existing:
            user = user.model_copy(update={"reputation": existing.reputation})
        self._users[user.id] = user
        return user

    async def adjust_reputation(self, user_id: UserId, delta: int) -> None:
        """Add a signed delta to the user's reputation."""
        user = self._users.get(user_id)
        if user:
            self._users[user_id] = user.model_copy(
                update={"reputation": user.reputation + delta}
            )
