"""Thread routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel

from threadtree.application.usecase.thread import (
    AddCommentRequest,
    AddCommentResponse,
    AddCommentUseCase,
    CreatePostRequest,
    CreatePostResponse,
    CreatePostUseCase,
    GetThreadRequest,
    GetThreadUseCase,
    ListThreadsRequest,
    ListThreadsResponse,
    ListThreadsUseCase,
    ReconcileChildrenRequest,
    ReconcileChildrenResponse,
    ReconcileChildrenUseCase,
    ThreadView,
)
from threadtree.domain.error import (
    InvalidationError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)

router = APIRouter(prefix="/threads", tags=["threads"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a top-level thread."""

    text: str
    author_id: str
    community_id: str | None = None
    invalidation_topic: str = "/"


class AddCommentAPIRequest(BaseModel):
    """API request for replying to a thread."""

    text: str
    author_id: str
    # Defaults to the parent's page path
    invalidation_topic: str | None = None


@router.post(
    "",
    response_model=CreatePostResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
) -> CreatePostResponse:
    """Create a top-level thread.

    Args:
        request: Thread creation data
        create_post_use_case: Create post use case from DI

    Returns:
        ID of the created thread

    Raises:
        HTTPException: If validation fails or the store fails
    """
    try:
        use_case_request = CreatePostRequest(
            text=request.text,
            author_id=request.author_id,
            community_id=request.community_id,
            invalidation_topic=request.invalidation_topic,
        )
        return await create_post_use_case.execute(use_case_request)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=f"Invalid id: {e}"
        )
    except (PersistenceError, InvalidationError) as e:
        logfire.error("Thread creation failed", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create thread",
        )


@router.get("", response_model=ListThreadsResponse)
async def list_threads(
    list_threads_use_case: FromDishka[ListThreadsUseCase],
    page: int = Query(default=1),
    page_size: int | None = Query(default=None),
) -> ListThreadsResponse:
    """List top-level threads, newest first.

    Args:
        list_threads_use_case: List threads use case from DI
        page: 1-based page number
        page_size: Threads per page (configured default when omitted)

    Returns:
        One page of threads with their authors and first-level replies
    """
    try:
        return await list_threads_use_case.execute(
            ListThreadsRequest(page=page, page_size=page_size)
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except PersistenceError as e:
        logfire.error("Thread listing failed", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch threads",
        )


@router.get("/{thread_id}", response_model=ThreadView)
async def get_thread(
    thread_id: str,
    get_thread_use_case: FromDishka[GetThreadUseCase],
    max_depth: int | None = Query(default=None),
) -> ThreadView:
    """Get a thread with its replies expanded down to max_depth levels.

    Replies deeper than max_depth are returned as bare ids.
    """
    try:
        return await get_thread_use_case.execute(
            GetThreadRequest(thread_id=thread_id, max_depth=max_depth)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=f"Invalid thread id: {e}"
        )
    except PersistenceError as e:
        logfire.error("Thread fetch failed", thread_id=thread_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch thread",
        )


@router.post(
    "/{thread_id}/comments",
    response_model=AddCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    thread_id: str,
    request: AddCommentAPIRequest,
    add_comment_use_case: FromDishka[AddCommentUseCase],
) -> AddCommentResponse:
    """Reply to a thread.

    Args:
        thread_id: Parent thread UUID
        request: Comment data
        add_comment_use_case: Add comment use case from DI

    Returns:
        ID of the created comment

    Raises:
        HTTPException: If the parent is missing, validation fails or the store fails
    """
    try:
        use_case_request = AddCommentRequest(
            parent_id=thread_id,
            text=request.text,
            author_id=request.author_id,
            invalidation_topic=request.invalidation_topic or f"/threads/{thread_id}",
        )
        return await add_comment_use_case.execute(use_case_request)
    except NotFoundError as e:
        logfire.warn("Comment creation failed - parent not found", error=str(e))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=f"Invalid id: {e}"
        )
    except (PersistenceError, InvalidationError) as e:
        logfire.error("Comment creation failed", thread_id=thread_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create comment",
        )


@router.post("/{thread_id}/reconcile", response_model=ReconcileChildrenResponse)
async def reconcile_children(
    thread_id: str,
    reconcile_children_use_case: FromDishka[ReconcileChildrenUseCase],
) -> ReconcileChildrenResponse:
    """Link replies that point at the thread but are missing from its children."""
    try:
        return await reconcile_children_use_case.execute(
            ReconcileChildrenRequest(thread_id=thread_id)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=f"Invalid thread id: {e}"
        )
    except PersistenceError as e:
        logfire.error("Reconcile failed", thread_id=thread_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to reconcile thread",
        )
