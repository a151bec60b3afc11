"""Invalidation signal interface."""

from abc import ABC, abstractmethod


class InvalidationSignal(ABC):
    """Notify-by-topic capability invoked after a successful mutation.

    The topic is an opaque token (typically the path of a cached page);
    the domain never interprets or routes it.
    """

    @abstractmethod
    async def notify(self, topic: str) -> None:
        """Signal that cached renderings of ``topic`` are stale.

        Raises:
            InvalidationError: If the signal could not be delivered
        """
        pass
