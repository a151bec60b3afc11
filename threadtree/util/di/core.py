"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from threadtree.config import InvalidationSettings, Settings, ThreadSettings
from threadtree.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_thread_settings(self, settings: Settings) -> ThreadSettings:
        """Provide thread tree settings."""
        return settings.threads

    @provide(scope=Scope.APP)
    def provide_invalidation_settings(self, settings: Settings) -> InvalidationSettings:
        """Provide invalidation settings."""
        return settings.invalidation
