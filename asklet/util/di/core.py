"""Configuration provider (concrete, shared by production and tests)."""

from dishka import Scope, provide

from asklet.config import AuthSettings, NotificationSettings, Settings, VotingSettings
from asklet.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings from the environment, plus the sections services depend on.

    Services take the narrowest section they need instead of all Settings.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        return Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def provide_voting_settings(self, settings: Settings) -> VotingSettings:
        return settings.voting

    @provide
    def provide_notification_settings(self, settings: Settings) -> NotificationSettings:
        return settings.notifications
