"""Notification use cases."""

from .create_notification import CreateNotificationRequest, CreateNotificationUseCase
from .list_notifications import (
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
)
from .mark_read import MarkReadRequest, MarkReadResponse, MarkReadUseCase

__all__ = [
    "CreateNotificationRequest",
    "CreateNotificationUseCase",
    "ListNotificationsRequest",
    "ListNotificationsResponse",
    "ListNotificationsUseCase",
    "MarkReadRequest",
    "MarkReadResponse",
    "MarkReadUseCase",
]
