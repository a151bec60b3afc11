"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Caller-side misuse: empty text, bad page window, negative depth."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class StoreError(DomainError):
    """Raised by repository implementations when the backing store fails.

    Services never let this escape; it is re-raised as PersistenceError
    with the name of the operation that was running.
    """

    pass


class PersistenceError(DomainError):
    """A store operation failed while performing a domain operation."""

    def __init__(self, operation: str, cause: BaseException):
        self.operation = operation
        self.cause = cause
        super().__init__(f"Error {operation}: {cause}")


class InvalidationError(DomainError):
    """Raised when an invalidation signal could not be delivered."""

    def __init__(self, topic: str, reason: str):
        self.topic = topic
        super().__init__(f"Failed to invalidate {topic!r}: {reason}")
