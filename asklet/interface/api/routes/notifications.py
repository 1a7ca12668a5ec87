"""Notification routes, including the live event stream."""

from collections.abc import AsyncIterator
from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Query, status
from fastapi.responses import StreamingResponse
from pydantic import Field

from asklet.adapter.realtime import ConnectionRegistry, LiveChannel, format_sse
from asklet.application.usecase.base import CamelModel
from asklet.application.usecase.notification import (
    CreateNotificationRequest,
    CreateNotificationUseCase,
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    MarkReadRequest,
    MarkReadResponse,
    MarkReadUseCase,
)
from asklet.application.usecase.views import NotificationView
from asklet.domain.error import NotFoundError, ValidationError
from asklet.domain.service import JWTService
from asklet.domain.value import UserId

router = APIRouter(
    prefix="/notifications", tags=["notifications"], route_class=DishkaRoute
)


class MarkReadAPIRequest(CamelModel):
    """API request for marking notifications read.

    Either ``notificationIds`` or ``markAll`` selects what to mark.
    """

    notification_ids: list[str] | None = None
    mark_all: bool = False


class CreateNotificationAPIRequest(CamelModel):
    """API request for creating a notification directly."""

    recipient_id: str | None = None
    message: str | None = Field(default=None)
    type: str | None = None


def _require_user(jwt_service: JWTService, auth_token: str | None) -> str:
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized"
        )
    return user_id


@router.get("", response_model=ListNotificationsResponse)
async def list_notifications(
    list_notifications_use_case: FromDishka[ListNotificationsUseCase],
    jwt_service: FromDishka[JWTService],
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=100),
    unread_only: bool = Query(default=False, alias="unreadOnly"),
    auth_token: str | None = Cookie(default=None),
) -> ListNotificationsResponse:
    """List the caller's notifications, newest first.

    Raises:
        HTTPException: 401 if not authenticated
    """
    user_id = _require_user(jwt_service, auth_token)
    return await list_notifications_use_case.execute(
        ListNotificationsRequest(
            recipient_id=user_id, page=page, limit=limit, unread_only=unread_only
        )
    )


@router.put("", response_model=MarkReadResponse)
async def mark_notifications_read(
    request: MarkReadAPIRequest,
    mark_read_use_case: FromDishka[MarkReadUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> MarkReadResponse:
    """Mark the given notifications, or all of them, as read.

    Notifications that belong to other users are never touched.

    Raises:
        HTTPException: 401 if not authenticated, 400 on malformed IDs
    """
    user_id = _require_user(jwt_service, auth_token)
    try:
        return await mark_read_use_case.execute(
            MarkReadRequest(
                recipient_id=user_id,
                notification_ids=request.notification_ids,
                mark_all=request.mark_all,
            )
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post(
    "", response_model=NotificationView, status_code=status.HTTP_201_CREATED
)
async def create_notification(
    request: CreateNotificationAPIRequest,
    create_notification_use_case: FromDishka[CreateNotificationUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> NotificationView:
    """Create a notification from the caller to another user and push it live.

    Raises:
        HTTPException: 401 if not authenticated, 400 on missing or invalid
            fields, 404 if the recipient does not exist
    """
    user_id = _require_user(jwt_service, auth_token)
    try:
        return await create_notification_use_case.execute(
            CreateNotificationRequest(
                sender_id=user_id,
                recipient_id=request.recipient_id,
                message=request.message,
                type=request.type,
            )
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error creating notification", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create notification",
        )


async def _stream_events(
    registry: ConnectionRegistry, recipient_id: UserId, channel: LiveChannel
) -> AsyncIterator[str]:
    try:
        async for event in channel.events():
            yield format_sse(event)
    finally:
        # Only removes this channel; a newer connection stays registered
        await registry.disconnect(recipient_id, channel)
        logfire.info("Notification stream closed", user_id=str(recipient_id))


@router.get("/stream")
async def stream_notifications(
    registry: FromDishka[ConnectionRegistry],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> StreamingResponse:
    """Open the caller's live notification stream (Server-Sent Events).

    The first frame is a ``connected`` handshake. Every notification created
    for the caller afterwards arrives as ``{"type": "notification", "data": ...}``.
    Opening a new stream replaces the caller's previous one.

    Raises:
        HTTPException: 401 if not authenticated
    """
    user_id = _require_user(jwt_service, auth_token)
    recipient_id = UserId(UUID(user_id))
    channel = await registry.connect(recipient_id)
    logfire.info("Notification stream opened", user_id=user_id)

    return StreamingResponse(
        _stream_events(registry, recipient_id, channel),
        media_type="text/event-stream",
        headers={"Cache-Control": "no-cache", "Connection": "keep-alive"},
    )
