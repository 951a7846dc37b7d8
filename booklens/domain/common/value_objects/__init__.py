"""Common value objects shared across all domain modules."""

from .ids import BookId, ReadingSessionId, UserId

__all__ = [
    "BookId",
    "ReadingSessionId",
    "UserId",
]
