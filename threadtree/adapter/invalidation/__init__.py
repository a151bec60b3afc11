"""Invalidation signal adapters."""

from .client import (
    LoggingInvalidationSignal,
    RecordingInvalidationSignal,
    WebhookInvalidationSignal,
)

__all__ = [
    "LoggingInvalidationSignal",
    "RecordingInvalidationSignal",
    "WebhookInvalidationSignal",
]
