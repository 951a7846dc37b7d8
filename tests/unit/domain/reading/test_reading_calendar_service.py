"""Tests for ReadingCalendarService domain service."""

from datetime import UTC, datetime, timedelta, timezone

from booklens.domain.common.value_objects import BookId, ReadingSessionId, UserId
from booklens.domain.library.entities.book import Book
from booklens.domain.reading.entities.reading_session import ReadingSession
from booklens.domain.reading.services.reading_calendar_service import ReadingCalendarService


def _make_book(book_id: int, title: str = "Dune") -> Book:
    now = datetime.now(UTC)
    return Book(
        id=BookId(book_id),
        user_id=UserId(1),
        title=title,
        author="Frank Herbert",
        created_at=now,
        updated_at=now,
        total_page=300,
    )


def _make_session(session_id: int, book: Book, start: datetime, seconds: int) -> ReadingSession:
    return ReadingSession(
        id=ReadingSessionId(session_id),
        user_id=UserId(1),
        book_id=book.id,
        start_time=start,
        end_time=start + timedelta(seconds=seconds),
        pages_read=5,
    )


class TestGroupByDay:
    def test_sessions_on_same_day_are_summed(self) -> None:
        book = _make_book(1)
        morning = _make_session(1, book, datetime(2024, 3, 5, 10, 0, tzinfo=UTC), 1800)
        evening = _make_session(2, book, datetime(2024, 3, 5, 20, 0, tzinfo=UTC), 900)

        days = ReadingCalendarService.group_by_day([(morning, book), (evening, book)])

        assert list(days) == ["2024-03-05"]
        day = days["2024-03-05"]
        assert day.date == "2024-03-05"
        assert day.total_time == 2700
        assert [entry.session.id for entry in day.sessions] == [
            ReadingSessionId(1),
            ReadingSessionId(2),
        ]

    def test_days_without_sessions_are_absent(self) -> None:
        book = _make_book(1)
        first = _make_session(1, book, datetime(2024, 3, 1, 8, 0, tzinfo=UTC), 60)
        later = _make_session(2, book, datetime(2024, 3, 9, 8, 0, tzinfo=UTC), 120)

        days = ReadingCalendarService.group_by_day([(first, book), (later, book)])

        assert list(days) == ["2024-03-01", "2024-03-09"]
        assert days["2024-03-09"].total_time == 120

    def test_grouping_uses_utc_date(self) -> None:
        book = _make_book(1)
        seoul = timezone(timedelta(hours=9))
        # 2024-03-06 01:00 in Seoul is still 2024-03-05 in UTC
        session = _make_session(1, book, datetime(2024, 3, 6, 1, 0, tzinfo=seoul), 600)

        days = ReadingCalendarService.group_by_day([(session, book)])

        assert list(days) == ["2024-03-05"]

    def test_entries_carry_their_book(self) -> None:
        dune = _make_book(1, "Dune")
        emma = _make_book(2, "Emma")
        a = _make_session(1, dune, datetime(2024, 3, 5, 9, 0, tzinfo=UTC), 60)
        b = _make_session(2, emma, datetime(2024, 3, 5, 9, 30, tzinfo=UTC), 60)

        day = ReadingCalendarService.group_by_day([(a, dune), (b, emma)])["2024-03-05"]

        assert [entry.book.title for entry in day.sessions] == ["Dune", "Emma"]

    def test_empty_input(self) -> None:
        assert ReadingCalendarService.group_by_day([]) == {}


class TestSummarizeDay:
    def test_summarize_day_labels_and_sums(self) -> None:
        book = _make_book(1)
        a = _make_session(1, book, datetime(2024, 3, 5, 10, 0, tzinfo=UTC), 1800)
        b = _make_session(2, book, datetime(2024, 3, 5, 20, 0, tzinfo=UTC), 900)

        day = ReadingCalendarService.summarize_day("2024-03-05", [(a, book), (b, book)])

        assert day.date == "2024-03-05"
        assert day.total_time == 2700
        assert [entry.duration for entry in day.sessions] == [1800, 900]

    def test_summarize_day_without_sessions(self) -> None:
        day = ReadingCalendarService.summarize_day("2024-03-05", [])
        assert day.total_time == 0
        assert day.sessions == []
