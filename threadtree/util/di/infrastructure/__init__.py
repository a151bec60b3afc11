"""Infrastructure providers."""

# Import bases
from .invalidation import InvalidationProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .invalidation import ProdInvalidationProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "InvalidationProvider",
    "PersistenceProvider",
    "ProdInvalidationProvider",
    "ProdPersistenceProvider",
]
