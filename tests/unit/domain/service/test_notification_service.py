"""Unit tests for NotificationService."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from asklet.adapter.realtime import ConnectionRegistry
from asklet.domain.model import Notification
from asklet.domain.repository import NotificationRepository
from asklet.domain.service import LiveNotifier, NotificationService
from asklet.domain.value import NotificationId, NotificationType, UserId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class RecordingNotifier(LiveNotifier):
    """Live notifier that records pushes instead of delivering them."""

    def __init__(self, connected: bool = True) -> None:
        self.connected = connected
        self.pushed: list[tuple[UserId, Notification]] = []

    async def push(self, recipient_id: UserId, notification: Notification) -> bool:
        self.pushed.append((recipient_id, notification))
        return self.connected


def _notification(recipient_id: UserId, minutes_ago: int, is_read: bool = False):
    return Notification(
        id=NotificationId(uuid4()),
        recipient_id=recipient_id,
        sender_id=UserId(uuid4()),
        type=NotificationType.ANSWER,
        message=f"posted {minutes_ago} minutes ago",
        is_read=is_read,
        created_at=datetime.now() - timedelta(minutes=minutes_ago),
    )


class TestCreateNotification:
    """Tests for create_notification."""

    @pytest.mark.asyncio
    async def test_stores_before_pushing(self, unit_env):
        """The pushed notification should be the stored record."""
        # Arrange
        repo = await unit_env.get(NotificationRepository)
        notifier = RecordingNotifier()
        service = NotificationService(notification_repository=repo, live_notifier=notifier)
        recipient, sender = UserId(uuid4()), UserId(uuid4())

        # Act
        created = await service.create_notification(
            recipient_id=recipient,
            sender_id=sender,
            type=NotificationType.MENTION,
            message="You were mentioned",
        )

        # Assert
        assert await repo.find_by_id(created.id) == created
        assert notifier.pushed == [(recipient, created)]
        assert created.is_read is False

    @pytest.mark.asyncio
    async def test_offline_recipient_still_gets_stored_notification(self, unit_env):
        """A failed or skipped push must not lose the notification."""
        # Arrange
        service = await unit_env.get(NotificationService)
        repo = await unit_env.get(NotificationRepository)
        registry = await unit_env.get(ConnectionRegistry)
        recipient = UserId(uuid4())
        assert not registry.is_connected(recipient)

        # Act
        created = await service.create_notification(
            recipient_id=recipient,
            sender_id=UserId(uuid4()),
            type=NotificationType.ANSWER,
            message="Someone answered",
        )

        # Assert
        stored = await repo.find_by_recipient(recipient)
        assert [n.id for n in stored] == [created.id]

    @pytest.mark.asyncio
    async def test_connected_recipient_receives_push(self, unit_env):
        """A connected recipient's channel gets the event after the handshake."""
        # Arrange
        service = await unit_env.get(NotificationService)
        registry = await unit_env.get(ConnectionRegistry)
        recipient = UserId(uuid4())
        channel = await registry.connect(recipient)

        # Act
        created = await service.create_notification(
            recipient_id=recipient,
            sender_id=UserId(uuid4()),
            type=NotificationType.ACCEPT,
            message="Your answer was accepted",
        )

        # Assert
        stream = channel.events()
        handshake = await stream.__anext__()
        pushed = await stream.__anext__()
        assert handshake["type"] == "connected"
        assert pushed["type"] == "notification"
        assert pushed["data"]["id"] == str(created.id)
        assert pushed["data"]["recipientId"] == str(recipient)
        assert pushed["data"]["isRead"] is False
        await registry.disconnect(recipient, channel)


class TestListNotifications:
    """Tests for list_notifications."""

    @pytest.mark.asyncio
    async def test_pages_newest_first_with_unread_count(self, unit_env):
        """Listing should be newest first and report unread across all pages."""
        # Arrange
        service = await unit_env.get(NotificationService)
        repo = await unit_env.get(NotificationRepository)
        recipient = UserId(uuid4())
        for minutes_ago in (30, 20, 10):
            await repo.save(_notification(recipient, minutes_ago))
        await repo.save(_notification(recipient, 40, is_read=True))
        await repo.save(_notification(UserId(uuid4()), 5))

        # Act
        first = await service.list_notifications(recipient, page=1, limit=2)
        second = await service.list_notifications(recipient, page=2, limit=2)
        unread = await service.list_notifications(recipient, unread_only=True)

        # Assert
        assert [n.message for n in first.notifications] == [
            "posted 10 minutes ago",
            "posted 20 minutes ago",
        ]
        assert [n.message for n in second.notifications] == [
            "posted 30 minutes ago",
            "posted 40 minutes ago",
        ]
        assert first.total == 4
        assert first.unread_count == 3
        assert unread.total == 3


class TestMarkRead:
    """Tests for mark_read and mark_all_read."""

    @pytest.mark.asyncio
    async def test_mark_read_only_touches_own_notifications(self, unit_env):
        """IDs belonging to someone else should be ignored."""
        # Arrange
        service = await unit_env.get(NotificationService)
        repo = await unit_env.get(NotificationRepository)
        me, other = UserId(uuid4()), UserId(uuid4())
        mine = await repo.save(_notification(me, 1))
        theirs = await repo.save(_notification(other, 1))

        # Act
        updated = await service.mark_read([mine.id, theirs.id], me)

        # Assert
        assert updated == 1
        assert (await repo.find_by_id(mine.id)).is_read is True
        assert (await repo.find_by_id(theirs.id)).is_read is False

    @pytest.mark.asyncio
    async def test_mark_read_with_no_ids_is_noop(self, unit_env):
        service = await unit_env.get(NotificationService)
        repo = await unit_env.get(NotificationRepository)
        me = UserId(uuid4())
        await repo.save(_notification(me, 1))

        assert await service.mark_read([], me) == 0
        assert await repo.count_by_recipient(me, unread_only=True) == 1

    @pytest.mark.asyncio
    async def test_mark_all_read(self, unit_env):
        """Mark all should clear the recipient's unread count only."""
        # Arrange
        service = await unit_env.get(NotificationService)
        repo = await unit_env.get(NotificationRepository)
        me, other = UserId(uuid4()), UserId(uuid4())
        for minutes_ago in (1, 2, 3):
            await repo.save(_notification(me, minutes_ago))
        await repo.save(_notification(other, 1))

        # Act
        updated = await service.mark_all_read(me)

        # Assert
        assert updated == 3
        assert await repo.count_by_recipient(me, unread_only=True) == 0
        assert await repo.count_by_recipient(other, unread_only=True) == 1
