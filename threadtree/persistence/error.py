"""Translation of SQLAlchemy failures into domain StoreError."""

import functools
from typing import Awaitable, Callable, ParamSpec, TypeVar

from sqlalchemy.exc import SQLAlchemyError

from threadtree.domain.error import StoreError

P = ParamSpec("P")
R = TypeVar("R")


def translate_store_errors(
    func: Callable[P, Awaitable[R]],
) -> Callable[P, Awaitable[R]]:
    """Wrap a repository coroutine so SQLAlchemy errors surface as StoreError."""

    @functools.wraps(func)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return await func(*args, **kwargs)
        except SQLAlchemyError as e:
            raise StoreError(f"{func.__qualname__} failed: {e}") from e

    return wrapper
