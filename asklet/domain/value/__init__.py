"""Domain value objects for Asklet."""

from asklet.domain.value.identifiers import (
    AnswerId,
    NotificationId,
    QuestionId,
    TagId,
    UserId,
)
from asklet.domain.value.types import (
    NotificationType,
    TagName,
    UserRole,
    Username,
    VotableType,
    VoteDirection,
)

__all__ = [
    # Identifiers
    "UserId",
    "QuestionId",
    "AnswerId",
    "NotificationId",
    "TagId",
    # Types
    "NotificationType",
    "TagName",
    "UserRole",
    "Username",
    "VotableType",
    "VoteDirection",
]
