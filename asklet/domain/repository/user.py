"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from asklet.domain.model.user import User
from asklet.domain.value import UserId, Username


class UserRepository(ABC):
    """Persistence of user accounts and their reputation."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Fetch several users at once, e.g. the authors on a question page.

        Unknown IDs are skipped, so the result may be shorter than the input.
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[User]:
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Look up a login email; callers pass it lowercased."""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Insert or update a user's account fields.

        Reputation is only written on insert; afterwards it changes through
        adjust_reputation alone.
        """
        pass

    @abstractmethod
    async def adjust_reputation(self, user_id: UserId, delta: int) -> None:
        """Add a signed delta to the user's reputation in one relative update.

        Concurrent adjustments never lose each other. There is no floor, so
        reputation can go negative.
        """
        pass
