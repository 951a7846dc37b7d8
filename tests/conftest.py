"""Pytest configuration and fixtures."""

import os

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key-with-at-least-32-bytes!")

from collections.abc import Generator  # noqa: E402
from datetime import UTC, datetime, timedelta  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from booklens import models  # noqa: E402
from booklens.database import Base, get_db  # noqa: E402
from booklens.infrastructure.identity.auth.token_service import (  # noqa: E402
    create_access_token,
)
from booklens.main import app  # noqa: E402

# Default user ID used by the API tests
DEFAULT_USER_ID = 1
OTHER_USER_ID = 2

# Test database URL (in-memory SQLite shared by every thread)
TEST_DATABASE_URL = "sqlite://"

test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Create a test client authenticated as the default user."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        test_client.headers.update(auth_headers(DEFAULT_USER_ID))
        yield test_client

    app.dependency_overrides.clear()


def auth_headers(user_id: int) -> dict[str, str]:
    """Bearer header for a user."""
    return {"Authorization": f"Bearer {create_access_token(user_id)}"}


def create_test_book(
    db_session: Session,
    user_id: int = DEFAULT_USER_ID,
    title: str = "Test Book",
    author: str = "Test Author",
    total_page: int = 200,
    read_page: int = 0,
    progress: float = 0.0,
    status: str = "READING",
    thumbnail: str | None = None,
    updated_at: datetime | None = None,
) -> models.Book:
    """Create a book row directly in the database."""
    now = updated_at or datetime.now(UTC)
    book = models.Book(
        user_id=user_id,
        title=title,
        author=author,
        total_page=total_page,
        read_page=read_page,
        progress=progress,
        status=status,
        total_reading_time=0,
        thumbnail=thumbnail,
        created_at=now,
        updated_at=now,
    )
    db_session.add(book)
    db_session.commit()
    db_session.refresh(book)
    return book


def create_reading_session(
    db_session: Session,
    book: models.Book,
    start_time: datetime,
    duration_seconds: int,
    pages_read: int = 0,
    user_id: int | None = None,
) -> models.ReadingSession:
    """Create a reading session row directly in the database."""
    session = models.ReadingSession(
        user_id=user_id if user_id is not None else book.user_id,
        book_id=book.id,
        start_time=start_time,
        end_time=start_time + timedelta(seconds=duration_seconds),
        pages_read=pages_read,
    )
    db_session.add(session)
    db_session.commit()
    db_session.refresh(session)
    return session


def create_posting(
    db_session: Session,
    book: models.Book | None,
    user_id: int = DEFAULT_USER_ID,
    comments: int = 0,
    likes: int = 0,
) -> models.Posting:
    """Create a posting with optional comments and likes from distinct users."""
    posting = models.Posting(
        user_id=user_id,
        book_id=book.id if book else None,
        title="Thoughts",
        content="Worth reading.",
    )
    posting.comments = [
        models.Comment(user_id=100 + i, content=f"Comment {i}") for i in range(comments)
    ]
    posting.likes = [models.Like(user_id=100 + i) for i in range(likes)]
    db_session.add(posting)
    db_session.commit()
    db_session.refresh(posting)
    return posting
