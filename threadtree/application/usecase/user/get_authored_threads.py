"""Get authored threads use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from threadtree.application.usecase.thread.views import ThreadView, to_thread_view
from threadtree.config import ThreadSettings
from threadtree.domain.error import ValidationError
from threadtree.domain.service import UserIndex
from threadtree.domain.value import UserId


class GetAuthoredThreadsRequest(BaseModel):
    """Get authored threads request."""

    user_id: str  # UUID string
    max_depth: int = Field(default=1, ge=0)


class GetAuthoredThreadsResponse(BaseModel):
    """Get authored threads response."""

    user_id: str
    threads: list[ThreadView]


class GetAuthoredThreadsUseCase:
    """Use case for a user's "my posts" view."""

    def __init__(
        self, user_index: UserIndex, thread_settings: ThreadSettings
    ) -> None:
        """Initialize get authored threads use case.

        Args:
            user_index: Authored-thread index service
            thread_settings: Expansion depth limit
        """
        self.user_index = user_index
        self.thread_settings = thread_settings

    async def execute(
        self, request: GetAuthoredThreadsRequest
    ) -> GetAuthoredThreadsResponse:
        """Execute get authored threads flow.

        Raises:
            ValueError: If user_id is not a valid UUID
            ValidationError: If max_depth is above the configured limit
            NotFoundError: If the user does not exist
        """
        if request.max_depth > self.thread_settings.max_depth_limit:
            raise ValidationError(
                f"max_depth must be <= {self.thread_settings.max_depth_limit}"
            )

        with logfire.span("get_authored_threads.execute", user_id=request.user_id):
            threads = await self.user_index.authored_threads(
                UserId(UUID(request.user_id)), max_depth=request.max_depth
            )
            return GetAuthoredThreadsResponse(
                user_id=request.user_id,
                threads=[to_thread_view(thread) for thread in threads],
            )
