"""
Domain layer exceptions.

Raised when an entity would end up in an invalid state. The application
layer translates them into input validation errors.
"""


class DomainError(Exception):
    """Base exception for all domain errors."""

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class InvariantViolationError(DomainError):
    """
    Raised when an entity field breaks one of its invariants.

    Example: a negative total page count on a Book.
    """

    def __init__(self, entity: str, field: str, message: str) -> None:
        super().__init__(message, {"entity": entity, "field": field})
        self.entity = entity
        self.field = field
