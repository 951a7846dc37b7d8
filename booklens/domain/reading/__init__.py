"""Reading module domain layer."""

from .entities import ReadingSession
from .services import ReadingCalendarService

__all__ = [
    "ReadingCalendarService",
    "ReadingSession",
]
