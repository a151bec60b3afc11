"""Base service class for domain services."""

from contextlib import contextmanager
from typing import Iterator

import logfire

from threadtree.domain.error import PersistenceError, StoreError, ValidationError


class Service:
    """Base class for all domain services.

    Domain services contain business logic that doesn't naturally belong
    to a single entity or spans multiple entities/aggregates.
    """

    pass


@contextmanager
def store_boundary(operation: str) -> Iterator[None]:
    """Re-raise store failures inside the block as PersistenceError.

    Args:
        operation: Human-readable name of the running operation,
            e.g. "creating thread"
    """
    try:
        yield
    except StoreError as e:
        logfire.error("Store operation failed", operation=operation, error=str(e))
        raise PersistenceError(operation, e) from e


def require_text(text: str) -> str:
    """Reject empty or whitespace-only thread text."""
    if not text or not text.strip():
        raise ValidationError("Thread text must not be empty")
    return text
