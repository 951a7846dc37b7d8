from typing import Protocol

from booklens.domain.common.value_objects.ids import BookId, UserId
from booklens.domain.library.entities.book import Book


class BookRepositoryProtocol(Protocol):
    def find_by_id(
        self, book_id: BookId, user_id: UserId, *, for_update: bool = False
    ) -> Book | None: ...

    def find_all_by_user(self, user_id: UserId) -> list[Book]: ...

    def save(self, book: Book) -> Book: ...

    def delete(self, book: Book) -> None: ...
