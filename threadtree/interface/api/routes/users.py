"""User routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status

from threadtree.application.usecase.user import (
    GetAuthoredThreadsRequest,
    GetAuthoredThreadsResponse,
    GetAuthoredThreadsUseCase,
)
from threadtree.domain.error import NotFoundError, PersistenceError, ValidationError

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


@router.get("/{user_id}/threads", response_model=GetAuthoredThreadsResponse)
async def get_authored_threads(
    user_id: str,
    get_authored_threads_use_case: FromDishka[GetAuthoredThreadsUseCase],
    max_depth: int = Query(default=1),
) -> GetAuthoredThreadsResponse:
    """Get the top-level threads a user has posted, newest first.

    Args:
        user_id: User UUID
        get_authored_threads_use_case: Use case from DI
        max_depth: Reply levels to expand under each thread

    Returns:
        The user's threads

    Raises:
        HTTPException: 404 if the user doesn't exist
    """
    try:
        return await get_authored_threads_use_case.execute(
            GetAuthoredThreadsRequest(user_id=user_id, max_depth=max_depth)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except PersistenceError as e:
        logfire.error("Authored threads fetch failed", user_id=user_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch threads",
        )
