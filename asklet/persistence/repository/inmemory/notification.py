"""In-memory notification repository for testing."""

from typing import Optional, Sequence

from asklet.domain.model import Notification
from asklet.domain.repository.notification import NotificationRepository
from asklet.domain.value import NotificationId, UserId


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self) -> None:
        self._notifications: dict[NotificationId, Notification] = {}

    def _for_recipient(self, recipient_id: UserId, unread_only: bool) -> list[Notification]:
        return [
            n
            for n in self._notifications.values()
            if n.recipient_id == recipient_id and (not unread_only or not n.is_read)
        ]

    async def find_by_id(self, notification_id: NotificationId) -> Optional[Notification]:
        """Find a notification by ID."""
        return self._notifications.get(notification_id)

    async def find_by_recipient(
        self,
        recipient_id: UserId,
        unread_only: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Notification]:
        """Find a recipient's notifications, newest first."""
        notifications = self._for_recipient(recipient_id, unread_only)
        notifications.sort(key=lambda n: n.created_at, reverse=True)
        return notifications[offset : offset + limit]

    async def count_by_recipient(self, recipient_id: UserId, unread_only: bool = False) -> int:
        """Count a recipient's notifications."""
        return len(self._for_recipient(recipient_id, unread_only))

    async def save(self, notification: Notification) -> Notification:
        """Store a notification."""
        self._notifications[notification.id] = notification
        return notification

    async def mark_read(
        self,
        recipient_id: UserId,
        notification_ids: Optional[Sequence[NotificationId]] = None,
    ) -> int:
        """Mark a recipient's unread notifications as read."""
        wanted = set(notification_ids) if notification_ids is not None else None
        updated = 0
        for notification in self._for_recipient(recipient_id, unread_only=True):
            if wanted is not None and notification.id not in wanted:
                continue
            self._notifications[notification.id] = notification.model_copy(
                update={"is_read": True}
            )
            updated += 1
        return updated
