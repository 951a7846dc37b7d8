"""
Domain-centric repository for ReadingSession.

Returns domain entities instead of ORM models.
Uses ReadingSessionMapper internally for conversions.
"""

import logging
from datetime import datetime

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from booklens.domain.common.value_objects import BookId, UserId
from booklens.domain.library.entities.book import Book
from booklens.domain.reading.entities.reading_session import ReadingSession
from booklens.infrastructure.common.timestamps import as_utc
from booklens.infrastructure.library.mappers.book_mapper import BookMapper
from booklens.infrastructure.reading.mappers.reading_session_mapper import ReadingSessionMapper
from booklens.models import Book as BookORM
from booklens.models import ReadingSession as ReadingSessionORM

logger = logging.getLogger(__name__)


class ReadingSessionRepository:
    """Repository for ReadingSession persistence (domain-centric)."""

    def __init__(self, db: Session) -> None:
        """
        Initialize repository.

        Args:
            db: SQLAlchemy database session
        """
        self.db = db
        self.mapper = ReadingSessionMapper()
        self.book_mapper = BookMapper()

    def add(self, session: ReadingSession) -> ReadingSession:
        """Insert a new session."""
        orm_model = self.mapper.to_orm(session)
        self.db.add(orm_model)
        self.db.flush()
        return self.mapper.to_domain(orm_model)

    def delete_by_book_id(self, book_id: BookId) -> int:
        """
        Delete every session recorded against a book.

        Returns:
            Number of deleted sessions
        """
        result = self.db.execute(
            delete(ReadingSessionORM).where(ReadingSessionORM.book_id == book_id.value)
        )
        logger.debug("Deleted %s reading sessions of book %s", result.rowcount, book_id.value)
        return result.rowcount

    def find_with_books_between(
        self, user_id: UserId, start: datetime, end: datetime
    ) -> list[tuple[ReadingSession, Book]]:
        """
        Sessions of a user that started within [start, end], with their books.

        Args:
            user_id: Owner of the sessions
            start: Inclusive lower bound on start time
            end: Inclusive upper bound on start time

        Returns:
            (session, book) pairs in ascending start time order
        """
        stmt = (
            select(ReadingSessionORM, BookORM)
            .join(BookORM, ReadingSessionORM.book_id == BookORM.id)
            .where(
                ReadingSessionORM.user_id == user_id.value,
                ReadingSessionORM.start_time >= as_utc(start),
                ReadingSessionORM.start_time <= as_utc(end),
            )
            .order_by(ReadingSessionORM.start_time.asc(), ReadingSessionORM.id.asc())
        )
        return [
            (self.mapper.to_domain(session_orm), self.book_mapper.to_domain(book_orm))
            for session_orm, book_orm in self.db.execute(stmt).all()
        ]
