"""Tests for reading session API endpoints."""

from datetime import UTC, datetime
from typing import Any

import pytest
from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from booklens import models
from booklens.domain.library.entities.book import Book
from booklens.infrastructure.library.repositories import BookRepository
from tests.conftest import (
    OTHER_USER_ID,
    auth_headers,
    create_reading_session,
    create_test_book,
)

SESSION_ITEM_KEYS = {
    "bookId",
    "bookTitle",
    "bookAuthor",
    "bookThumbnail",
    "pagesRead",
    "duration",
    "startTime",
}


@pytest.fixture
def test_book(db_session: Session) -> models.Book:
    return create_test_book(
        db_session,
        title="Dune",
        author="Frank Herbert",
        total_page=200,
        thumbnail="https://covers.example/dune.jpg",
    )


def _save_payload(book: models.Book, **overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "bookId": book.id,
        "bookTitle": book.title,
        "bookAuthor": book.author,
        "pagesRead": 20,
        "duration": 1800,
        "startTime": "2024-03-05T10:00:00Z",
    }
    payload.update(overrides)
    return payload


def _parse_time(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


class TestSaveReadingSession:
    """Test suite for POST /reading-sessions/save."""

    def test_save_session_success(
        self, client: TestClient, db_session: Session, test_book: models.Book
    ) -> None:
        response = client.post("/api/reading-sessions/save", json=_save_payload(test_book))

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"message": "Reading session saved"}

        session = db_session.query(models.ReadingSession).one()
        assert session.book_id == test_book.id
        assert session.pages_read == 20
        # SQLite drops tzinfo, normalise before comparing
        assert session.start_time.replace(tzinfo=UTC) == datetime(2024, 3, 5, 10, 0, tzinfo=UTC)
        assert session.end_time.replace(tzinfo=UTC) == datetime(2024, 3, 5, 10, 30, tzinfo=UTC)

    def test_save_accumulates_book_counters_without_changing_status(
        self, client: TestClient, test_book: models.Book
    ) -> None:
        client.post("/api/reading-sessions/save", json=_save_payload(test_book))
        client.post(
            "/api/reading-sessions/save",
            json=_save_payload(
                test_book, pagesRead=200, duration=600, startTime="2024-03-06T08:00:00Z"
            ),
        )

        book = client.get(f"/api/books/{test_book.id}").json()
        assert book["read_page"] == 220
        assert book["total_reading_time"] == 2400
        assert book["progress"] == 100.0
        assert book["status"] == "reading"

    def test_save_zero_pages_and_zero_duration(
        self, client: TestClient, test_book: models.Book
    ) -> None:
        response = client.post(
            "/api/reading-sessions/save",
            json=_save_payload(test_book, pagesRead=0, duration=0),
        )
        assert response.status_code == status.HTTP_200_OK

    def test_save_for_missing_book(self, client: TestClient, test_book: models.Book) -> None:
        response = client.post(
            "/api/reading-sessions/save", json=_save_payload(test_book, bookId=9999)
        )
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"error": "Book not found"}

    def test_save_for_foreign_book_writes_nothing(
        self, client: TestClient, db_session: Session, test_book: models.Book
    ) -> None:
        response = client.post(
            "/api/reading-sessions/save",
            json=_save_payload(test_book),
            headers=auth_headers(OTHER_USER_ID),
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert db_session.query(models.ReadingSession).count() == 0
        db_session.expire_all()
        assert db_session.get(models.Book, test_book.id).read_page == 0

    @pytest.mark.parametrize(
        "overrides",
        [
            {"bookId": 0},
            {"bookId": -3},
            {"bookId": 2_147_483_648},
            {"bookId": "abc"},
            {"bookTitle": ""},
            {"bookAuthor": None},
            {"pagesRead": -1},
            {"duration": -60},
            {"pagesRead": 2_147_483_648},
            {"duration": 2_147_483_648},
            {"duration": 10**15},
            {"startTime": "9999-12-31T23:59:00Z", "duration": 3600},
            {"startTime": "yesterday"},
        ],
    )
    def test_save_rejects_invalid_fields(
        self, client: TestClient, test_book: models.Book, overrides: dict[str, Any]
    ) -> None:
        response = client.post(
            "/api/reading-sessions/save", json=_save_payload(test_book, **overrides)
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "error" in response.json()

    def test_save_overflowing_book_counters_writes_nothing(
        self, client: TestClient, db_session: Session
    ) -> None:
        book = create_test_book(db_session, read_page=2_147_483_000)

        response = client.post(
            "/api/reading-sessions/save", json=_save_payload(book, pagesRead=1000)
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": "read_page is too large"}
        db_session.expire_all()
        assert db_session.query(models.ReadingSession).count() == 0
        assert db_session.get(models.Book, book.id).read_page == 2_147_483_000

    def test_failed_book_update_discards_session(
        self,
        client: TestClient,
        db_session: Session,
        test_book: models.Book,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        def fail(self: BookRepository, book: Book) -> Book:
            raise OperationalError("UPDATE books", {}, Exception("database is locked"))

        monkeypatch.setattr(BookRepository, "save", fail)

        response = client.post("/api/reading-sessions/save", json=_save_payload(test_book))

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {"error": "Persistence failure"}
        db_session.expire_all()
        assert db_session.query(models.ReadingSession).count() == 0
        book = db_session.get(models.Book, test_book.id)
        assert (book.read_page, book.total_reading_time) == (0, 0)

    @pytest.mark.parametrize(
        "missing", ["bookId", "bookTitle", "bookAuthor", "pagesRead", "duration", "startTime"]
    )
    def test_save_requires_field(
        self, client: TestClient, test_book: models.Book, missing: str
    ) -> None:
        payload = _save_payload(test_book)
        del payload[missing]

        response = client.post("/api/reading-sessions/save", json=payload)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": f"{missing}: Field required"}


class TestReadingCalendar:
    """Test suite for GET /reading-sessions/calendar and /reading-sessions/date."""

    @pytest.fixture
    def march_sessions(
        self, client: TestClient, db_session: Session, test_book: models.Book
    ) -> None:
        for start, duration in [
            ("2024-03-05T20:00:00Z", 900),
            ("2024-03-05T10:00:00Z", 1800),
            ("2024-03-20T07:30:00Z", 300),
            ("2024-04-01T00:00:00Z", 999),
        ]:
            response = client.post(
                "/api/reading-sessions/save",
                json=_save_payload(test_book, startTime=start, duration=duration, pagesRead=5),
            )
            assert response.status_code == status.HTTP_200_OK

        foreign = create_test_book(db_session, user_id=OTHER_USER_ID, title="Not Yours")
        create_reading_session(
            db_session, foreign, datetime(2024, 3, 5, 12, 0, tzinfo=UTC), duration_seconds=5000
        )

    @pytest.mark.usefixtures("march_sessions")
    def test_day_summary(self, client: TestClient, test_book: models.Book) -> None:
        response = client.get("/api/reading-sessions/date", params={"date": "2024-03-05"})

        assert response.status_code == status.HTTP_200_OK
        data = response.json()["data"]
        assert data["date"] == "2024-03-05"
        assert data["totalTime"] == 2700
        assert [s["duration"] for s in data["sessions"]] == [1800, 900]
        assert [_parse_time(s["startTime"]) for s in data["sessions"]] == [
            datetime(2024, 3, 5, 10, 0, tzinfo=UTC),
            datetime(2024, 3, 5, 20, 0, tzinfo=UTC),
        ]
        first = data["sessions"][0]
        assert set(first) == SESSION_ITEM_KEYS
        assert first["bookId"] == test_book.id
        assert first["bookTitle"] == "Dune"
        assert first["bookAuthor"] == "Frank Herbert"
        assert first["bookThumbnail"] == "https://covers.example/dune.jpg"
        assert first["pagesRead"] == 5

    @pytest.mark.usefixtures("march_sessions")
    def test_month_summary(self, client: TestClient) -> None:
        response = client.get(
            "/api/reading-sessions/calendar", params={"year": 2024, "month": 3}
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()["data"]
        assert list(data) == ["2024-03-05", "2024-03-20"]
        assert data["2024-03-05"]["totalTime"] == 2700
        assert len(data["2024-03-05"]["sessions"]) == 2
        assert data["2024-03-20"]["totalTime"] == 300

    @pytest.mark.usefixtures("march_sessions")
    def test_month_boundary_session_belongs_to_next_month(self, client: TestClient) -> None:
        response = client.get(
            "/api/reading-sessions/calendar", params={"year": 2024, "month": 4}
        )
        assert list(response.json()["data"]) == ["2024-04-01"]

    @pytest.mark.usefixtures("march_sessions")
    def test_other_users_sessions_are_excluded(self, client: TestClient) -> None:
        response = client.get(
            "/api/reading-sessions/date",
            params={"date": "2024-03-05"},
            headers=auth_headers(OTHER_USER_ID),
        )
        data = response.json()["data"]
        assert data["totalTime"] == 5000
        assert [s["bookTitle"] for s in data["sessions"]] == ["Not Yours"]

    def test_empty_day(self, client: TestClient) -> None:
        response = client.get("/api/reading-sessions/date", params={"date": "2024-03-05"})
        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "data": {"date": "2024-03-05", "totalTime": 0, "sessions": []}
        }

    def test_empty_month(self, client: TestClient) -> None:
        response = client.get(
            "/api/reading-sessions/calendar", params={"year": 2024, "month": 3}
        )
        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"data": {}}

    def test_calendar_defaults_to_current_month(self, client: TestClient) -> None:
        response = client.get("/api/reading-sessions/calendar")
        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"data": {}}

    @pytest.mark.parametrize(
        "params",
        [
            {"year": 2024, "month": 13},
            {"year": 2024, "month": 0},
            {"year": 1899, "month": 1},
            {"year": 2101, "month": 1},
            {"year": "twenty", "month": 1},
        ],
    )
    def test_calendar_rejects_invalid_month(self, client: TestClient, params: dict) -> None:
        response = client.get("/api/reading-sessions/calendar", params=params)
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "error" in response.json()

    @pytest.mark.parametrize("value", ["2024-13-01", "not-a-date", "2024-3-5", "2023-02-29"])
    def test_date_rejects_invalid_date(self, client: TestClient, value: str) -> None:
        response = client.get("/api/reading-sessions/date", params={"date": value})
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "error" in response.json()

    def test_date_is_required(self, client: TestClient) -> None:
        response = client.get("/api/reading-sessions/date")
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": "date: Field required"}
