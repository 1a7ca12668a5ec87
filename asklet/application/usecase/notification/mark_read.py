"""Mark notifications read use case."""

from uuid import UUID

from pydantic import BaseModel

from asklet.application.usecase.base import BaseUseCase, CamelModel
from asklet.domain.error import ValidationError
from asklet.domain.service import NotificationService
from asklet.domain.value import NotificationId, UserId


class MarkReadRequest(BaseModel):
    """Mark notifications read request."""

    recipient_id: str  # User ID from authenticated user
    notification_ids: list[str] | None = None
    mark_all: bool = False


class MarkReadResponse(CamelModel):
    """Mark notifications read response."""

    message: str
    updated: int


class MarkReadUseCase(BaseUseCase):
    """Use case for marking some or all of the caller's notifications read.

    IDs that belong to other users are silently skipped.
    """

    def __init__(self, notification_service: NotificationService) -> None:
        """Initialize mark read use case.

        Args:
            notification_service: Notification domain service
        """
        self.notification_service = notification_service

    async def execute(self, request: MarkReadRequest) -> MarkReadResponse:
        """Execute mark read flow.

        Raises:
            ValidationError: If a notification ID is not a UUID
        """
        recipient_id = UserId(UUID(request.recipient_id))

        if request.mark_all:
            updated = await self.notification_service.mark_all_read(recipient_id)
        else:
            try:
                ids = [
                    NotificationId(UUID(raw)) for raw in request.notification_ids or []
                ]
            except ValueError:
                raise ValidationError("notificationIds must be UUIDs")
            updated = await self.notification_service.mark_read(ids, recipient_id)

        return MarkReadResponse(message="Notifications marked as read", updated=updated)
