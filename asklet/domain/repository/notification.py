"""Notification repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from asklet.domain.model.notification import Notification
from asklet.domain.value import NotificationId, UserId


class NotificationRepository(ABC):
    """Repository for Notification entity."""

    @abstractmethod
    async def find_by_id(self, notification_id: NotificationId) -> Optional[Notification]:
        """Find a notification by ID."""
        pass

    @abstractmethod
    async def find_by_recipient(
        self,
        recipient_id: UserId,
        unread_only: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Notification]:
        """Find a recipient's notifications, newest first.

        Args:
            recipient_id: The recipient's user ID
            unread_only: Return only unread notifications
            limit: Maximum number of notifications to return
            offset: Number of notifications to skip

        Returns:
            Page of notifications
        """
        pass

    @abstractmethod
    async def count_by_recipient(self, recipient_id: UserId, unread_only: bool = False) -> int:
        """Count a recipient's notifications.

        Args:
            recipient_id: The recipient's user ID
            unread_only: Count only unread notifications

        Returns:
            Number of notifications
        """
        pass

    @abstractmethod
    async def save(self, notification: Notification) -> Notification:
        """Save a notification (create).

        Args:
            notification: The notification to save

        Returns:
            The saved notification
        """
        pass

    @abstractmethod
    async def mark_read(
        self,
        recipient_id: UserId,
        notification_ids: Optional[Sequence[NotificationId]] = None,
    ) -> int:
        """Mark a recipient's notifications as read.

        Only notifications owned by ``recipient_id`` are touched; IDs
        belonging to other users are ignored.

        Args:
            recipient_id: The recipient's user ID
            notification_ids: Notifications to mark, or None for all unread

        Returns:
            Number of notifications updated
        """
        pass
