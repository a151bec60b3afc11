"""Invalidation infrastructure providers."""

from dishka import Scope, provide
import logfire

from threadtree.adapter.invalidation import (
    LoggingInvalidationSignal,
    WebhookInvalidationSignal,
)
from threadtree.config import InvalidationSettings
from threadtree.domain.service import InvalidationSignal
from threadtree.util.di.base import ProviderBase


class InvalidationProvider(ProviderBase):
    """Invalidation component base."""

    __mock_component__ = "invalidation"


class ProdInvalidationProvider(InvalidationProvider):
    """Production invalidation provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_invalidation_signal(
        self, invalidation_settings: InvalidationSettings
    ) -> InvalidationSignal:
        """Provide the invalidation signal.

        Falls back to logging the topics when no webhook URL is configured.
        """
        if not invalidation_settings.webhook_url:
            logfire.warn("No invalidation webhook configured, topics will only be logged")
            return LoggingInvalidationSignal()

        return WebhookInvalidationSignal(
            webhook_url=invalidation_settings.webhook_url,
            secret=invalidation_settings.secret,
            timeout=invalidation_settings.timeout_seconds,
        )
