"""
Error taxonomy of the music store.

Every store operation either applies fully or raises one of the
exceptions below without touching any state.  The API layer maps them
to HTTP status codes (400 for ``ValidationError`` and ``ConflictError``,
404 for ``NotFoundError``).
"""


class StoreError(Exception):
    """Base class for expected failures of store operations."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(StoreError):
    """A required field is missing or empty."""


class ConflictError(StoreError):
    """A uniqueness constraint would be violated."""


class NotFoundError(StoreError):
    """No entity is stored under the given key."""
