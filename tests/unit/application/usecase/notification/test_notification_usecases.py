"""Unit tests for the notification use cases."""

from uuid import uuid4

import pytest

from asklet.application.usecase.notification import (
    CreateNotificationRequest,
    CreateNotificationUseCase,
    ListNotificationsRequest,
    ListNotificationsUseCase,
    MarkReadRequest,
    MarkReadUseCase,
)
from asklet.domain.error import NotFoundError, ValidationError
from asklet.domain.repository import UserRepository
from tests.conftest import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _users(unit_env):
    user_repo = await unit_env.get(UserRepository)
    sender = await user_repo.save(make_user("sender"))
    recipient = await user_repo.save(make_user("recipient"))
    return sender, recipient


class TestCreateNotification:
    """Tests for the create notification use case."""

    @pytest.mark.asyncio
    async def test_creates_unread_notification(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateNotificationUseCase)
        sender, recipient = await _users(unit_env)

        # Act
        view = await use_case.execute(
            CreateNotificationRequest(
                sender_id=str(sender.id),
                recipient_id=str(recipient.id),
                message="Ping",
                type="mention",
            )
        )

        # Assert
        assert view.recipient_id == str(recipient.id)
        assert view.sender_id == str(sender.id)
        assert view.is_read is False
        assert view.model_dump(by_alias=True, mode="json")["type"] == "mention"

    @pytest.mark.asyncio
    async def test_missing_fields_rejected(self, unit_env):
        use_case = await unit_env.get(CreateNotificationUseCase)
        sender, recipient = await _users(unit_env)

        with pytest.raises(ValidationError, match="recipientId, message, and type"):
            await use_case.execute(
                CreateNotificationRequest(
                    sender_id=str(sender.id), recipient_id=str(recipient.id)
                )
            )

    @pytest.mark.asyncio
    async def test_unknown_type_rejected(self, unit_env):
        use_case = await unit_env.get(CreateNotificationUseCase)
        sender, recipient = await _users(unit_env)

        with pytest.raises(ValidationError, match="type must be one of"):
            await use_case.execute(
                CreateNotificationRequest(
                    sender_id=str(sender.id),
                    recipient_id=str(recipient.id),
                    message="Ping",
                    type="broadcast",
                )
            )

    @pytest.mark.asyncio
    async def test_unknown_recipient_not_found(self, unit_env):
        use_case = await unit_env.get(CreateNotificationUseCase)
        sender, _ = await _users(unit_env)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateNotificationRequest(
                    sender_id=str(sender.id),
                    recipient_id=str(uuid4()),
                    message="Ping",
                    type="answer",
                )
            )


class TestListAndMarkRead:
    """Tests for listing and marking notifications read."""

    @pytest.mark.asyncio
    async def test_mark_read_updates_unread_count(self, unit_env):
        # Arrange
        create = await unit_env.get(CreateNotificationUseCase)
        listing = await unit_env.get(ListNotificationsUseCase)
        mark_read = await unit_env.get(MarkReadUseCase)
        sender, recipient = await _users(unit_env)
        created = [
            await create.execute(
                CreateNotificationRequest(
                    sender_id=str(sender.id),
                    recipient_id=str(recipient.id),
                    message=f"Ping {i}",
                    type="comment",
                )
            )
            for i in range(3)
        ]

        # Act
        marked = await mark_read.execute(
            MarkReadRequest(
                recipient_id=str(recipient.id), notification_ids=[created[0].id]
            )
        )
        page = await listing.execute(ListNotificationsRequest(recipient_id=str(recipient.id)))
        unread = await listing.execute(
            ListNotificationsRequest(recipient_id=str(recipient.id), unread_only=True)
        )

        # Assert
        assert marked.updated == 1
        assert page.unread_count == 2
        assert page.pagination.total == 3
        assert len(unread.notifications) == 2
        assert created[0].id not in {n.id for n in unread.notifications}

    @pytest.mark.asyncio
    async def test_mark_all(self, unit_env):
        create = await unit_env.get(CreateNotificationUseCase)
        listing = await unit_env.get(ListNotificationsUseCase)
        mark_read = await unit_env.get(MarkReadUseCase)
        sender, recipient = await _users(unit_env)
        for i in range(2):
            await create.execute(
                CreateNotificationRequest(
                    sender_id=str(sender.id),
                    recipient_id=str(recipient.id),
                    message=f"Ping {i}",
                    type="answer",
                )
            )

        marked = await mark_read.execute(
            MarkReadRequest(recipient_id=str(recipient.id), mark_all=True)
        )
        page = await listing.execute(ListNotificationsRequest(recipient_id=str(recipient.id)))

        assert marked.updated == 2
        assert page.unread_count == 0

    @pytest.mark.asyncio
    async def test_malformed_ids_rejected(self, unit_env):
        mark_read = await unit_env.get(MarkReadUseCase)

        with pytest.raises(ValidationError, match="notificationIds must be UUIDs"):
            await mark_read.execute(
                MarkReadRequest(recipient_id=str(uuid4()), notification_ids=["nope"])
            )
