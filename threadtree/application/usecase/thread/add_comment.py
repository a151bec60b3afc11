"""Add comment use case."""

from uuid import UUID

from pydantic import BaseModel

from threadtree.domain.service import CommentLinker
from threadtree.domain.value import ThreadId, UserId


class AddCommentRequest(BaseModel):
    """Add comment request."""

    parent_id: str  # UUID string
    text: str
    author_id: str  # UUID string
    invalidation_topic: str


class AddCommentResponse(BaseModel):
    """Add comment response."""

    thread_id: str
    parent_id: str


class AddCommentUseCase:
    """Use case for replying to a thread."""

    def __init__(self, comment_linker: CommentLinker) -> None:
        """Initialize add comment use case.

        Args:
            comment_linker: Comment linking domain service
        """
        self.comment_linker = comment_linker

    async def execute(self, request: AddCommentRequest) -> AddCommentResponse:
        """Execute add comment flow.

        Raises:
            ValueError: If an id is not a valid UUID
            ValidationError: If text is blank
            NotFoundError: If the parent thread does not exist
            PersistenceError: If the store fails
        """
        parent_id = ThreadId(UUID(request.parent_id))
        comment_id = await self.comment_linker.add_comment(
            parent_id=parent_id,
            text=request.text,
            author_id=UserId(UUID(request.author_id)),
            invalidation_topic=request.invalidation_topic,
        )
        return AddCommentResponse(thread_id=str(comment_id), parent_id=str(parent_id))
