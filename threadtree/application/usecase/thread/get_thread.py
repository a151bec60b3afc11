"""Get thread use case."""

from uuid import UUID

from pydantic import BaseModel

from threadtree.config import ThreadSettings
from threadtree.domain.error import ValidationError
from threadtree.domain.service import ThreadService
from threadtree.domain.value import ThreadId

from .views import ThreadView, to_thread_view


class GetThreadRequest(BaseModel):
    """Get thread request."""

    thread_id: str  # UUID string
    max_depth: int | None = None  # None uses the configured default


class GetThreadUseCase:
    """Use case for the bounded detail view of a thread."""

    def __init__(
        self, thread_service: ThreadService, thread_settings: ThreadSettings
    ) -> None:
        self.thread_service = thread_service
        self.thread_settings = thread_settings

    async def execute(self, request: GetThreadRequest) -> ThreadView:
        """Execute get thread flow.

        Raises:
            ValueError: If thread_id is not a valid UUID
            ValidationError: If max_depth is above the configured limit
            NotFoundError: If the thread does not exist
        """
        if (
            request.max_depth is not None
            and request.max_depth > self.thread_settings.max_depth_limit
        ):
            raise ValidationError(
                f"max_depth must be <= {self.thread_settings.max_depth_limit}"
            )

        thread = await self.thread_service.get_by_id(
            ThreadId(UUID(request.thread_id)), max_depth=request.max_depth
        )
        return to_thread_view(thread)
