"""Live notification delivery over server-sent events."""

from .registry import ConnectionRegistry, LiveChannel, format_sse

__all__ = ["ConnectionRegistry", "LiveChannel", "format_sse"]
