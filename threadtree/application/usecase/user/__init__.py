"""User use cases."""

from .get_authored_threads import (
    GetAuthoredThreadsRequest,
    GetAuthoredThreadsResponse,
    GetAuthoredThreadsUseCase,
)

__all__ = [
    "GetAuthoredThreadsRequest",
    "GetAuthoredThreadsResponse",
    "GetAuthoredThreadsUseCase",
]
