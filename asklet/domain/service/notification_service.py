"""Notification domain service.

Notifications are stored first and pushed second. The stored record is what
clients read back; the live push only shortens the time until they see it.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Sequence
from uuid import uuid4

import logfire

from asklet.domain.model import Notification
from asklet.domain.repository import NotificationRepository
from asklet.domain.value import (
    AnswerId,
    NotificationId,
    NotificationType,
    QuestionId,
    UserId,
)

from .base import Service


class LiveNotifier:
    """Interface for pushing notifications to connected clients."""

    async def push(self, recipient_id: UserId, notification: Notification) -> bool:
        """Deliver a notification to the recipient's open channel, if any.

        Implementations must not raise on delivery failure.

        Args:
            recipient_id: Recipient user ID
            notification: Stored notification

        Returns:
            True if the event was handed to a live channel
        """
        raise NotImplementedError


@dataclass
class NotificationPage:
    """One page of a recipient's notifications."""

    notifications: list[Notification]
    total: int
    unread_count: int
    page: int
    limit: int


class NotificationService(Service):
    """Domain service for notification creation, delivery and read state."""

    def __init__(
        self,
        notification_repository: NotificationRepository,
        live_notifier: LiveNotifier,
    ) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification repository
            live_notifier: Push channel registry
        """
        self.notification_repository = notification_repository
        self.live_notifier = live_notifier

    async def create_notification(
        self,
        recipient_id: UserId,
        sender_id: UserId,
        type: NotificationType,
        message: str,
        related_question_id: Optional[QuestionId] = None,
        related_answer_id: Optional[AnswerId] = None,
    ) -> Notification:
        """Store a notification and push it to the recipient if connected.

        Args:
            recipient_id: User receiving the notification
            sender_id: User whose action caused it
            type: Notification type
            message: Human readable text
            related_question_id: Question the notification refers to
            related_answer_id: Answer the notification refers to

        Returns:
            The stored notification
        """
        with logfire.span(
            "notification_service.create_notification",
            recipient_id=str(recipient_id),
            type=type.value,
        ):
            notification = Notification(
                id=NotificationId(uuid4()),
                recipient_id=recipient_id,
                sender_id=sender_id,
                type=type,
                message=message,
                related_question_id=related_question_id,
                related_answer_id=related_answer_id,
                created_at=datetime.now(),
            )
            saved = await self.notification_repository.save(notification)
            logfire.info(
                "Notification created",
                notification_id=str(saved.id),
                recipient_id=str(recipient_id),
            )

            delivered = await self.live_notifier.push(recipient_id, saved)
            logfire.info(
                "Notification push attempted",
                notification_id=str(saved.id),
                delivered=delivered,
            )
            return saved

    async def list_notifications(
        self,
        recipient_id: UserId,
        page: int = 1,
        limit: int = 20,
        unread_only: bool = False,
    ) -> NotificationPage:
        """List a recipient's notifications, newest first.

        Args:
            recipient_id: Recipient user ID
            page: 1-based page number
            limit: Page size
            unread_only: Only include unread notifications

        Returns:
            The requested page with totals and the unread count
        """
        with logfire.span(
            "notification_service.list_notifications",
            recipient_id=str(recipient_id),
            page=page,
            limit=limit,
        ):
            notifications = await self.notification_repository.find_by_recipient(
                recipient_id,
                unread_only=unread_only,
                limit=limit,
                offset=(page - 1) * limit,
            )
            total = await self.notification_repository.count_by_recipient(
                recipient_id, unread_only=unread_only
            )
            unread_count = await self.notification_repository.count_by_recipient(
                recipient_id, unread_only=True
            )
            return NotificationPage(
                notifications=notifications,
                total=total,
                unread_count=unread_count,
                page=page,
                limit=limit,
            )

    async def mark_read(
        self, notification_ids: Sequence[NotificationId], recipient_id: UserId
    ) -> int:
        """Mark the given notifications read, ignoring ones the recipient doesn't own.

        Returns:
            Number of notifications that changed state
        """
        with logfire.span(
            "notification_service.mark_read",
            recipient_id=str(recipient_id),
            count=len(notification_ids),
        ):
            if not notification_ids:
                return 0
            updated = await self.notification_repository.mark_read(
                recipient_id, list(notification_ids)
            )
            logfire.info("Notifications marked read", updated=updated)
            return updated

    async def mark_all_read(self, recipient_id: UserId) -> int:
        """Mark every unread notification of the recipient as read."""
        with logfire.span(
            "notification_service.mark_all_read", recipient_id=str(recipient_id)
        ):
            updated = await self.notification_repository.mark_read(recipient_id)
            logfire.info("All notifications marked read", updated=updated)
            return updated
