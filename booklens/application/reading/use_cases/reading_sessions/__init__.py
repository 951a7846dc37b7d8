from .reading_calendar_use_case import ReadingCalendarUseCase
from .record_reading_session_use_case import (
    ReadingSessionRecordData,
    RecordReadingSessionUseCase,
)

__all__ = [
    "ReadingCalendarUseCase",
    "ReadingSessionRecordData",
    "RecordReadingSessionUseCase",
]
