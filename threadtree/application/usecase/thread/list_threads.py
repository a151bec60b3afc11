"""List threads use case."""

import logfire
from pydantic import BaseModel

from threadtree.config import ThreadSettings
from threadtree.domain.error import ValidationError
from threadtree.domain.service import ThreadService

from .views import ThreadView, to_thread_view


class ListThreadsRequest(BaseModel):
    """List threads request."""

    page: int = 1
    page_size: int | None = None  # None uses the configured default


class ListThreadsResponse(BaseModel):
    """List threads response."""

    items: list[ThreadView]
    has_next: bool
    page: int
    page_size: int


class ListThreadsUseCase:
    """Use case for the paginated top-level listing."""

    def __init__(
        self, thread_service: ThreadService, thread_settings: ThreadSettings
    ) -> None:
        """Initialize list threads use case.

        Args:
            thread_service: Thread domain service
            thread_settings: Page size limits
        """
        self.thread_service = thread_service
        self.thread_settings = thread_settings

    async def execute(self, request: ListThreadsRequest) -> ListThreadsResponse:
        """Execute list threads flow.

        Raises:
            ValidationError: If the page window is invalid or too large
        """
        page_size = (
            request.page_size
            if request.page_size is not None
            else self.thread_settings.page_size
        )
        if page_size > self.thread_settings.max_page_size:
            raise ValidationError(
                f"page_size must be <= {self.thread_settings.max_page_size}"
            )

        page = await self.thread_service.list_top_level(
            page_number=request.page, page_size=page_size
        )

        logfire.debug("Thread page built", page=page.page_number, count=len(page.items))
        return ListThreadsResponse(
            items=[to_thread_view(item) for item in page.items],
            has_next=page.has_next,
            page=page.page_number,
            page_size=page.page_size,
        )
