"""In-process registry of live notification channels.

Each recipient has at most one open channel. A channel is a bounded queue
of events drained by the recipient's event-stream response. Delivery is
best-effort: a channel that is closed or whose client stopped reading is
dropped, and the notification stays available through the listing API.

The registry lives in process memory, so with several API instances a
recipient only receives pushes from the instance holding their stream.
"""

import asyncio
import json
from typing import Any, AsyncIterator, Optional

import logfire

from asklet.adapter.error import ChannelSendError
from asklet.application.usecase.views import NotificationView
from asklet.config import NotificationSettings
from asklet.domain.model import Notification
from asklet.domain.service.notification_service import LiveNotifier
from asklet.domain.value import UserId

HANDSHAKE_EVENT = {"type": "connected", "message": "Connected"}

_CLOSED = object()


def format_sse(event: dict[str, Any]) -> str:
    """Encode an event as one server-sent events frame."""
    return f"data: {json.dumps(event)}\n\n"


def notification_event(notification: Notification) -> dict[str, Any]:
    """Build the event pushed for a new notification.

    The payload is the same view the notification listing returns.
    """
    view = NotificationView.from_domain(notification)
    return {"type": "notification", "data": view.model_dump(mode="json", by_alias=True)}


class LiveChannel:
    """Bounded event queue feeding one event-stream response."""

    def __init__(self, recipient_id: UserId, max_pending: int) -> None:
        self.recipient_id = recipient_id
        self._queue: asyncio.Queue = asyncio.Queue(maxsize=max_pending + 1)
        self._max_pending = max_pending
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def send(self, event: dict[str, Any]) -> None:
        """Queue an event for the client.

        Raises:
            ChannelSendError: If the channel is closed or the client has
                fallen too far behind
        """
        if self._closed:
            raise ChannelSendError("Channel is closed")
        # One slot is reserved for the close marker
        if self._queue.qsize() >= self._max_pending:
            raise ChannelSendError("Channel buffer is full")
        self._queue.put_nowait(event)

    def close(self) -> None:
        """Close the channel; pending events are discarded."""
        if self._closed:
            return
        self._closed = True
        while not self._queue.empty():
            self._queue.get_nowait()
        self._queue.put_nowait(_CLOSED)

    async def events(self) -> AsyncIterator[dict[str, Any]]:
        """Yield queued events until the channel is closed."""
        while True:
            event = await self._queue.get()
            if event is _CLOSED:
                return
            yield event


class ConnectionRegistry(LiveNotifier):
    """Maps recipients to their open live channel.

    Connect, disconnect and push may run from concurrent requests; the
    mapping is only touched while holding the lock.
    """

    def __init__(self, settings: NotificationSettings) -> None:
        self.settings = settings
        self._channels: dict[UserId, LiveChannel] = {}
        self._lock = asyncio.Lock()

    async def connect(self, recipient_id: UserId) -> LiveChannel:
        """Open a channel for a recipient, replacing any existing one.

        The handshake event is queued before the channel becomes visible
        to pushes, so it is always the first event the client reads.
        """
        channel = LiveChannel(recipient_id, self.settings.stream_queue_size)
        channel.send(HANDSHAKE_EVENT)

        async with self._lock:
            previous = self._channels.get(recipient_id)
            self._channels[recipient_id] = channel

        if previous is not None:
            previous.close()
            logfire.info("Live channel replaced", recipient_id=str(recipient_id))
        else:
            logfire.info("Live channel opened", recipient_id=str(recipient_id))
        return channel

    async def disconnect(
        self, recipient_id: UserId, channel: Optional[LiveChannel] = None
    ) -> None:
        """Deregister and close a recipient's channel.

        When ``channel`` is given, only that exact channel is removed, so a
        replaced stream shutting down leaves its replacement alone.
        """
        async with self._lock:
            current = self._channels.get(recipient_id)
            if current is None or (channel is not None and current is not channel):
                removed = None
            else:
                removed = self._channels.pop(recipient_id)

        if channel is not None:
            channel.close()
        if removed is not None:
            removed.close()
            logfire.info("Live channel closed", recipient_id=str(recipient_id))

    async def push(self, recipient_id: UserId, notification: Notification) -> bool:
        """Push a notification event to the recipient's channel, if any."""
        return await self.send_event(recipient_id, notification_event(notification))

    async def send_event(self, recipient_id: UserId, event: dict[str, Any]) -> bool:
        """Send an event to the recipient's channel.

        A failed send drops the channel and is not reported to the caller.

        Returns:
            True if the event was queued on a live channel
        """
        async with self._lock:
            channel = self._channels.get(recipient_id)

        if channel is None:
            logfire.debug("No live channel for recipient", recipient_id=str(recipient_id))
            return False

        try:
            channel.send(event)
        except ChannelSendError as e:
            logfire.warn(
                "Live channel send failed, dropping channel",
                recipient_id=str(recipient_id),
                error=str(e),
            )
            await self.disconnect(recipient_id, channel)
            return False
        return True

    def is_connected(self, recipient_id: UserId) -> bool:
        return recipient_id in self._channels

    @property
    def connection_count(self) -> int:
        return len(self._channels)
