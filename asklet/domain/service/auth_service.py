"""Authentication domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from asklet.config import AuthSettings
from asklet.domain.error import (
    AuthenticationError,
    BusinessRuleViolationError,
    ValidationError,
)
from asklet.domain.model import User
from asklet.domain.value import UserId, Username
from asklet.util.password import hash_password, verify_password

from .base import Service
from .user_service import UserService

MIN_PASSWORD_LENGTH = 6


class AuthService(Service):
    """Domain service for email/password authentication."""

    def __init__(self, user_service: UserService, auth_settings: AuthSettings) -> None:
        """Initialize auth service.

        Args:
            user_service: User domain service
            auth_settings: Authentication settings
        """
        self.user_service = user_service
        self.auth_settings = auth_settings

    async def register(self, username: str, email: str, password: str) -> User:
        """Register a new user.

        Args:
            username: Desired username
            email: Email address (stored lowercased)
            password: Plain-text password

        Returns:
            The created user

        Raises:
            ValidationError: If a field is missing or invalid
            BusinessRuleViolationError: If the email or username is taken
        """
        with logfire.span("auth_service.register", username=username):
            email = email.strip().lower()
            if not username or not email or not password:
                raise ValidationError("All fields are required")
            if len(password) < MIN_PASSWORD_LENGTH:
                raise ValidationError(
                    f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
                )
            try:
                handle = Username(username)
            except PydanticValidationError:
                raise ValidationError("Username must be 3-40 characters")

            existing = await self.user_service.get_user_by_email(email)
            if existing is None:
                existing = await self.user_service.get_user_by_username(handle)
            if existing is not None:
                logfire.warn("Registration for existing user", username=handle.root)
                raise BusinessRuleViolationError("User already exists")

            now = datetime.now()
            user = User(
                id=UserId(uuid4()),
                username=handle,
                email=email,
                password_hash=hash_password(
                    password, self.auth_settings.password_hash_rounds
                ),
                created_at=now,
                updated_at=now,
            )
            saved = await self.user_service.save(user)
            logfire.info("User registered", user_id=str(saved.id))
            return saved

    async def authenticate(self, email: str, password: str) -> User:
        """Check an email/password pair.

        Raises:
            ValidationError: If either field is empty
            AuthenticationError: If no user matches
        """
        with logfire.span("auth_service.authenticate"):
            if not email or not password:
                raise ValidationError("Email and password required")

            user = await self.user_service.get_user_by_email(email.strip().lower())
            if user is None or not verify_password(password, user.password_hash):
                logfire.warn("Failed login attempt")
                raise AuthenticationError()

            logfire.info("User authenticated", user_id=str(user.id))
            return user
