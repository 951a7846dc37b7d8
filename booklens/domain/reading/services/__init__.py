from .reading_calendar_service import DayActivity, ReadingCalendarService, SessionEntry

__all__ = [
    "DayActivity",
    "ReadingCalendarService",
    "SessionEntry",
]
