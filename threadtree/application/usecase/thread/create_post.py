"""Create post use case."""

from uuid import UUID

from pydantic import BaseModel

from threadtree.domain.service import ThreadService
from threadtree.domain.value import CommunityId, UserId


class CreatePostRequest(BaseModel):
    """Create post request."""

    text: str
    author_id: str  # UUID string
    community_id: str | None = None
    invalidation_topic: str = "/"


class CreatePostResponse(BaseModel):
    """Create post response."""

    thread_id: str


class CreatePostUseCase:
    """Use case for creating a top-level thread."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize create post use case.

        Args:
            thread_service: Thread domain service
        """
        self.thread_service = thread_service

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Args:
            request: Create post request

        Returns:
            ID of the created thread

        Raises:
            ValueError: If an id is not a valid UUID
            ValidationError: If text is blank
            PersistenceError: If the store fails
        """
        thread_id = await self.thread_service.create_post(
            text=request.text,
            author_id=UserId(UUID(request.author_id)),
            community_id=(
                CommunityId(UUID(request.community_id))
                if request.community_id
                else None
            ),
            invalidation_topic=request.invalidation_topic,
        )
        return CreatePostResponse(thread_id=str(thread_id))
