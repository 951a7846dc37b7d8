"""Application exception hierarchy.

Every error that reaches the HTTP layer is a ``BookLensError`` carrying the
status code it is rendered with.
"""

from fastapi import HTTPException, status


class BookLensError(Exception):
    """Base exception for all BookLens errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class ValidationError(BookLensError):
    """Malformed or missing input."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 400 status code."""
        super().__init__(message, status_code=400)


class NotFoundError(BookLensError):
    """Resource not found, or not owned by the caller."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=404)


class BookNotFoundError(NotFoundError):
    """Book not found error."""

    def __init__(self, book_id: int | None = None, *, message: str | None = None) -> None:
        """Initialize with book ID or custom message."""
        self.book_id = book_id
        if message:
            super().__init__(message)
        elif book_id is not None:
            super().__init__(f"Book with id {book_id} not found")
        else:
            super().__init__("Book not found")


class PersistenceError(BookLensError):
    """Transaction or store failure. Never retried by this layer."""

    def __init__(self, message: str = "Persistence failure") -> None:
        """Initialize with message and 500 status code."""
        super().__init__(message, status_code=500)


CredentialsException = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Could not validate credentials",
    headers={"WWW-Authenticate": "Bearer"},
)
