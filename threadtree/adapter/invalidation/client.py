"""Invalidation signal implementations.

The rendering frontend keeps cached pages keyed by path. After a mutation
the domain hands us an opaque topic, which we forward to the frontend's
revalidation endpoint.
"""

import httpx
import logfire

from threadtree.domain.error import InvalidationError
from threadtree.domain.service.invalidation import InvalidationSignal


class WebhookInvalidationSignal(InvalidationSignal):
    """Posts invalidation topics to a revalidation webhook."""

    def __init__(
        self,
        webhook_url: str,
        secret: str | None = None,
        timeout: float = 10.0,
    ) -> None:
        """Initialize webhook signal.

        Args:
            webhook_url: Revalidation endpoint of the frontend
            secret: Shared secret sent as X-Revalidate-Secret
            timeout: Request timeout in seconds
        """
        self.webhook_url = webhook_url
        self.secret = secret
        self.timeout = timeout

    async def notify(self, topic: str) -> None:
        """POST the topic to the webhook.

        Raises:
            InvalidationError: If the request fails or returns non-2xx
        """
        headers = {"Content-Type": "application/json"}
        if self.secret:
            headers["X-Revalidate-Secret"] = self.secret

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.webhook_url,
                    json={"topic": topic},
                    headers=headers,
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logfire.error("Invalidation webhook HTTP error", topic=topic, error=str(e))
            raise InvalidationError(topic, f"HTTP error: {e}") from e

        if not response.is_success:
            logfire.error(
                "Invalidation webhook rejected topic",
                topic=topic,
                status_code=response.status_code,
                error=response.text,
            )
            raise InvalidationError(topic, f"webhook returned {response.status_code}")

        logfire.info("Invalidation signalled", topic=topic)


class LoggingInvalidationSignal(InvalidationSignal):
    """Only records topics in the log; used when no webhook is configured."""

    async def notify(self, topic: str) -> None:
        logfire.info("Invalidation requested (no webhook configured)", topic=topic)


class RecordingInvalidationSignal(InvalidationSignal):
    """Mock signal for testing.

    Keeps every topic it receives, in order.
    """

    def __init__(self) -> None:
        self.topics: list[str] = []

    async def notify(self, topic: str) -> None:
        self.topics.append(topic)
