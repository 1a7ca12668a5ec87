"""Create notification use case."""

from uuid import UUID

from pydantic import BaseModel

from asklet.application.usecase.base import BaseUseCase
from asklet.application.usecase.views import NotificationView
from asklet.domain.error import ValidationError
from asklet.domain.service import NotificationService, UserService
from asklet.domain.value import NotificationType, UserId


class CreateNotificationRequest(BaseModel):
    """Create notification request."""

    sender_id: str  # User ID from authenticated user
    recipient_id: str | None = None
    message: str | None = None
    type: str | None = None


class CreateNotificationUseCase(BaseUseCase):
    """Use case for sending an ad-hoc notification to a user.

    Used to exercise live delivery; normal notifications come from answers
    and acceptances.
    """

    def __init__(
        self, notification_service: NotificationService, user_service: UserService
    ) -> None:
        """Initialize create notification use case.

        Args:
            notification_service: Notification domain service
            user_service: User domain service
        """
        self.notification_service = notification_service
        self.user_service = user_service

    async def execute(self, request: CreateNotificationRequest) -> NotificationView:
        """Execute create notification flow.

        Raises:
            ValidationError: If a field is missing or unknown
            NotFoundError: If the recipient does not exist
        """
        if not request.recipient_id or not request.message or not request.type:
            raise ValidationError("recipientId, message, and type required")
        try:
            notification_type = NotificationType(request.type)
        except ValueError:
            raise ValidationError(
                "type must be one of: "
                + ", ".join(t.value for t in NotificationType)
            )
        try:
            recipient_id = UserId(UUID(request.recipient_id))
        except ValueError:
            raise ValidationError(f"Invalid recipientId: {request.recipient_id}")

        recipient = await self.user_service.get_by_id(recipient_id)
        notification = await self.notification_service.create_notification(
            recipient_id=recipient.id,
            sender_id=UserId(UUID(request.sender_id)),
            type=notification_type,
            message=request.message,
        )
        return NotificationView.from_domain(notification)
