"""Pydantic schemas for reading session requests and calendar responses."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from booklens.domain.reading.services.reading_calendar_service import DayActivity, SessionEntry

MAX_INT = 2_147_483_647


class CamelModel(BaseModel):
    """Model exchanged with clients in camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ReadingSessionSaveRequest(CamelModel):
    """A finished reading session reported by the client."""

    book_id: int = Field(..., gt=0, le=MAX_INT)
    book_title: str = Field(..., min_length=1)
    book_author: str = Field(..., min_length=1)
    book_thumbnail: str | None = None
    pages_read: int = Field(..., ge=0, le=MAX_INT)
    duration: int = Field(..., ge=0, le=MAX_INT, description="Reading time in seconds")
    start_time: datetime


class MessageResponse(BaseModel):
    message: str


class CalendarSession(CamelModel):
    """One session inside a day bucket."""

    book_id: int
    book_title: str
    book_author: str
    book_thumbnail: str | None
    pages_read: int
    duration: int
    start_time: datetime

    @classmethod
    def from_entry(cls, entry: SessionEntry) -> "CalendarSession":
        return cls(
            book_id=entry.book.id.value,
            book_title=entry.book.title,
            book_author=entry.book.author,
            book_thumbnail=entry.book.thumbnail,
            pages_read=entry.session.pages_read,
            duration=entry.duration,
            start_time=entry.session.start_time,
        )


class DayActivityResponse(CamelModel):
    date: str
    total_time: int
    sessions: list[CalendarSession]

    @classmethod
    def from_activity(cls, activity: DayActivity) -> "DayActivityResponse":
        return cls(
            date=activity.date,
            total_time=activity.total_time,
            sessions=[CalendarSession.from_entry(entry) for entry in activity.sessions],
        )


class CalendarResponse(BaseModel):
    data: dict[str, DayActivityResponse]


class DayResponse(BaseModel):
    data: DayActivityResponse
