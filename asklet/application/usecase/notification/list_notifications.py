"""List notifications use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from asklet.application.usecase.base import BaseUseCase, CamelModel
from asklet.application.usecase.views import NotificationView, Pagination
from asklet.domain.service import NotificationService
from asklet.domain.value import UserId


class ListNotificationsRequest(BaseModel):
    """List notifications request."""

    recipient_id: str  # User ID from authenticated user
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1, le=100)
    unread_only: bool = False


class ListNotificationsResponse(CamelModel):
    """List notifications response."""

    notifications: list[NotificationView]
    unread_count: int
    pagination: Pagination


class ListNotificationsUseCase(BaseUseCase):
    """Use case for reading the caller's notifications, newest first."""

    def __init__(self, notification_service: NotificationService) -> None:
        """Initialize list notifications use case.

        Args:
            notification_service: Notification domain service
        """
        self.notification_service = notification_service

    async def execute(
        self, request: ListNotificationsRequest
    ) -> ListNotificationsResponse:
        """Execute list notifications flow."""
        result = await self.notification_service.list_notifications(
            UserId(UUID(request.recipient_id)),
            page=request.page,
            limit=request.limit,
            unread_only=request.unread_only,
        )
        return ListNotificationsResponse(
            notifications=[
                NotificationView.from_domain(n) for n in result.notifications
            ],
            unread_count=result.unread_count,
            pagination=Pagination.build(result.page, result.limit, result.total),
        )
