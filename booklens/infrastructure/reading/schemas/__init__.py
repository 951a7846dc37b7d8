from .reading_session_schemas import (
    CalendarResponse,
    CalendarSession,
    DayActivityResponse,
    DayResponse,
    MessageResponse,
    ReadingSessionSaveRequest,
)

__all__ = [
    "CalendarResponse",
    "CalendarSession",
    "DayActivityResponse",
    "DayResponse",
    "MessageResponse",
    "ReadingSessionSaveRequest",
]
