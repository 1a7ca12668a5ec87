"""User domain service."""

from dataclasses import dataclass
from typing import Sequence

import logfire

from asklet.domain.error import NotFoundError
from asklet.domain.model import User
from asklet.domain.repository import AnswerRepository, QuestionRepository, UserRepository
from asklet.domain.value import UserId, Username

from .base import Service


@dataclass
class UserStats:
    """Activity counters shown on a user's profile."""

    question_count: int
    answer_count: int
    accepted_answers: int
    reputation: int


class UserService(Service):
    """Domain service for user operations."""

    def __init__(
        self,
        user_repository: UserRepository,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            question_repository: Question repository
            answer_repository: Answer repository
        """
        self.user_repository = user_repository
        self.question_repository = question_repository
        self.answer_repository = answer_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_user_by_username(self, username: Username) -> User | None:
        """Get user by username.

        Args:
            username: Username

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.get_user_by_username", username=username.root):
            user = await self.user_repository.find_by_username(username)
            if not user:
                logfire.warn("User not found", username=username.root)
            return user

    async def get_user_by_email(self, email: str) -> User | None:
        """Get user by email.

        Args:
            email: User email

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.get_user_by_email", email=email):
            return await self.user_repository.find_by_email(email)

    async def get_users_by_ids(self, user_ids: Sequence[UserId]) -> dict[UserId, User]:
        """Batch-load users keyed by ID. Unknown IDs are omitted."""
        unique_ids = list(dict.fromkeys(user_ids))
        if not unique_ids:
            return {}
        users = await self.user_repository.find_by_ids(unique_ids)
        return {user.id: user for user in users}

    async def adjust_reputation(self, user_id: UserId, delta: int) -> None:
        """Atomically add a signed delta to a user's reputation.

        Uses a relative database update so concurrent adjustments from
        votes and acceptances never overwrite each other. Reputation may
        go negative.

        Args:
            user_id: User ID
            delta: Signed reputation change
        """
        with logfire.span(
            "user_service.adjust_reputation", user_id=str(user_id), delta=delta
        ):
            await self.user_repository.adjust_reputation(user_id, delta)
            logfire.info("Reputation adjusted", user_id=str(user_id), delta=delta)

    async def save(self, user: User) -> User:
        """Save user (create or update).

        Args:
            user: User to save

        Returns:
            Saved user
        """
        with logfire.span(
            "user_service.save", user_id=str(user.id), username=user.username.root
        ):
            saved = await self.user_repository.save(user)
            logfire.info(
                "User saved", user_id=str(saved.id), username=saved.username.root
            )
            return saved

    async def get_stats(self, user: User) -> UserStats:
        """Collect profile counters for a user."""
        with logfire.span("user_service.get_stats", user_id=str(user.id)):
            question_count = await self.question_repository.count(author_id=user.id)
            answer_count = await self.answer_repository.count_by_author(user.id)
            accepted = await self.answer_repository.count_by_author(
                user.id, accepted_only=True
            )
            return UserStats(
                question_count=question_count,
                answer_count=answer_count,
                accepted_answers=accepted,
                reputation=user.reputation,
            )
