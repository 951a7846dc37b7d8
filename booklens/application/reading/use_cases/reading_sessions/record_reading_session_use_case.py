"""Record reading session use case."""

from dataclasses import dataclass
from datetime import datetime

import structlog

from booklens.application.common.unit_of_work import UnitOfWork
from booklens.application.library.protocols.book_repository import BookRepositoryProtocol
from booklens.application.reading.protocols.reading_session_repository import (
    ReadingSessionRepositoryProtocol,
)
from booklens.domain.common.exceptions import DomainError
from booklens.domain.common.value_objects import BookId, UserId
from booklens.domain.reading.entities.reading_session import ReadingSession
from booklens.exceptions import BookNotFoundError, ValidationError

logger = structlog.get_logger(__name__)


@dataclass
class ReadingSessionRecordData:
    """DTO for a finished reading session reported by a client."""

    book_id: int
    start_time: datetime
    duration_seconds: int
    pages_read: int


class RecordReadingSessionUseCase:
    """Use case for recording a reading session against a book."""

    def __init__(
        self,
        book_repository: BookRepositoryProtocol,
        reading_session_repository: ReadingSessionRepositoryProtocol,
        unit_of_work: UnitOfWork,
    ) -> None:
        self.book_repository = book_repository
        self.reading_session_repository = reading_session_repository
        self.unit_of_work = unit_of_work

    def record_session(self, data: ReadingSessionRecordData, user_id: int) -> None:
        """
        Store the session and fold it into the book's counters.

        The book row is locked for the duration of the transaction, so two
        sessions recorded at once for the same book both land in its
        counters. Status is never changed here.

        Args:
            data: Session details
            user_id: ID of the user who read

        Raises:
            ValidationError: If the duration or page count is negative, the session
                falls outside the representable time range, or the book counters
                would overflow
            BookNotFoundError: If the book does not exist or is not owned by the user
        """
        try:
            session = ReadingSession.create(
                user_id=UserId(user_id),
                book_id=BookId(data.book_id),
                start_time=data.start_time,
                duration_seconds=data.duration_seconds,
                pages_read=data.pages_read,
            )
        except (DomainError, ValueError) as e:
            raise ValidationError(str(e)) from e

        with self.unit_of_work:
            book = self.book_repository.find_by_id(
                session.book_id, session.user_id, for_update=True
            )
            if not book:
                logger.warning(
                    "reading_session_book_not_found", book_id=data.book_id, user_id=user_id
                )
                raise BookNotFoundError(message="Book not found")

            self.reading_session_repository.add(session)
            try:
                book.record_reading(data.pages_read, data.duration_seconds)
            except DomainError as e:
                raise ValidationError(str(e)) from e
            saved = self.book_repository.save(book)
            self.unit_of_work.commit()

        logger.info(
            "reading_session_recorded",
            book_id=data.book_id,
            user_id=user_id,
            pages_read=data.pages_read,
            duration=data.duration_seconds,
            progress=saved.progress,
        )
