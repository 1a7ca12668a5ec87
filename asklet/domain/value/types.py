"""Domain value objects for Asklet.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from asklet.domain.value.common import RootValueObject


class VoteDirection(str, Enum):
    """Direction of a vote."""

    UP = "up"
    DOWN = "down"


class VotableType(str, Enum):
    """Type of entity that can be voted on."""

    QUESTION = "question"
    ANSWER = "answer"


class NotificationType(str, Enum):
    """Kind of event a notification reports."""

    ANSWER = "answer"
    ACCEPT = "accept"
    COMMENT = "comment"
    MENTION = "mention"


class UserRole(str, Enum):
    """Role of a user account."""

    USER = "user"
    ADMIN = "admin"


class Username(RootValueObject[str]):
    """Public username, 3-40 characters after trimming."""

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username length."""
        v = v.strip()
        if len(v) < 3 or len(v) > 40:
            raise ValueError("Username must be 3-40 characters")
        return v


class TagName(RootValueObject[str]):
    """Tag name for categorizing questions.

    Stored lowercased and trimmed. Examples: 'python', 'asyncio', 'c++'
    """

    @field_validator("root")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        """Normalize and validate tag name."""
        v = v.strip().lower()
        if not re.match(r"^\S{1,35}$", v):
            raise ValueError("Tag name must be 1-35 characters without whitespace")
        return v
