"""Live notification delivery provider."""

from dishka import Scope, provide

from asklet.adapter.realtime import ConnectionRegistry
from asklet.config import NotificationSettings
from asklet.domain.service import LiveNotifier
from asklet.util.di.base import ProviderBase


class RealtimeProvider(ProviderBase):
    """Provides the process-wide registry of open notification streams.

    Concrete for both production and tests: the registry holds no external
    resources, so tests exercise the real one.
    """

    scope = Scope.APP

    @provide
    def get_connection_registry(
        self, settings: NotificationSettings
    ) -> ConnectionRegistry:
        """Provide the connection registry (one per container)."""
        return ConnectionRegistry(settings=settings)

    @provide
    def get_live_notifier(self, registry: ConnectionRegistry) -> LiveNotifier:
        """Expose the registry through the domain-facing interface."""
        return registry
