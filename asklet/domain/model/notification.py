"""Notification entity.

Notifications are the durable record of events a user should hear about.
Live delivery over a push channel is best-effort; this record is the
source of truth.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from asklet.domain.model.common import DomainModel
from asklet.domain.value import (
    AnswerId,
    NotificationId,
    NotificationType,
    QuestionId,
    UserId,
)


class Notification(DomainModel):
    """Notification entity."""

    id: NotificationId
    recipient_id: UserId
    sender_id: UserId
    type: NotificationType
    message: str = Field(min_length=1)
    related_question_id: Optional[QuestionId] = None
    related_answer_id: Optional[AnswerId] = None
    is_read: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
