"""Reconcile children use case."""

from uuid import UUID

from pydantic import BaseModel

from threadtree.domain.service import CommentLinker
from threadtree.domain.value import ThreadId


class ReconcileChildrenRequest(BaseModel):
    """Reconcile children request."""

    thread_id: str  # UUID string


class ReconcileChildrenResponse(BaseModel):
    """Reconcile children response."""

    thread_id: str
    linked: list[str]


class ReconcileChildrenUseCase:
    """Use case for repairing a thread's children list."""

    def __init__(self, comment_linker: CommentLinker) -> None:
        self.comment_linker = comment_linker

    async def execute(
        self, request: ReconcileChildrenRequest
    ) -> ReconcileChildrenResponse:
        """Link comments that point at the thread but are missing from it."""
        thread_id = ThreadId(UUID(request.thread_id))
        linked = await self.comment_linker.reconcile(thread_id)
        return ReconcileChildrenResponse(
            thread_id=str(thread_id), linked=[str(comment_id) for comment_id in linked]
        )
