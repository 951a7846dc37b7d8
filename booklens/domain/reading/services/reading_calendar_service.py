"""Domain service for grouping reading sessions into calendar days."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import UTC

from booklens.domain.library.entities.book import Book
from booklens.domain.reading.entities.reading_session import ReadingSession


@dataclass(frozen=True)
class SessionEntry:
    """One session as shown on the calendar, with the book it was read from."""

    session: ReadingSession
    book: Book

    @property
    def duration(self) -> int:
        return self.session.duration_seconds


@dataclass
class DayActivity:
    """Sessions started on one calendar day and their summed duration."""

    date: str
    total_time: int = 0
    sessions: list[SessionEntry] = field(default_factory=list)

    def add(self, entry: SessionEntry) -> None:
        self.sessions.append(entry)
        self.total_time += entry.duration


class ReadingCalendarService:
    """Stateless domain service for building calendar summaries."""

    @staticmethod
    def group_by_day(
        sessions_with_books: Iterable[tuple[ReadingSession, Book]],
    ) -> dict[str, DayActivity]:
        """
        Group sessions by the UTC date they started on.

        Input order is preserved inside each day, and days appear in the
        order their first session is seen. Days without sessions are absent.

        Args:
            sessions_with_books: (session, book) pairs ordered by start time

        Returns:
            Mapping of YYYY-MM-DD to DayActivity
        """
        days: dict[str, DayActivity] = {}
        for session, book in sessions_with_books:
            day = session.start_time.astimezone(UTC).date().isoformat()
            if day not in days:
                days[day] = DayActivity(date=day)
            days[day].add(SessionEntry(session=session, book=book))
        return days

    @staticmethod
    def summarize_day(
        date: str,
        sessions_with_books: Iterable[tuple[ReadingSession, Book]],
    ) -> DayActivity:
        """Collect every given session under a single day label."""
        activity = DayActivity(date=date)
        for session, book in sessions_with_books:
            activity.add(SessionEntry(session=session, book=book))
        return activity
