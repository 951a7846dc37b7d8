from datetime import datetime
from typing import Protocol

from booklens.domain.common.value_objects.ids import BookId, UserId
from booklens.domain.library.entities.book import Book
from booklens.domain.reading.entities.reading_session import ReadingSession


class ReadingSessionRepositoryProtocol(Protocol):
    def add(self, session: ReadingSession) -> ReadingSession: ...

    def delete_by_book_id(self, book_id: BookId) -> int: ...

    def find_with_books_between(
        self, user_id: UserId, start: datetime, end: datetime
    ) -> list[tuple[ReadingSession, Book]]: ...
