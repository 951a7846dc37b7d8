"""Read-only book queries."""

from booklens.application.library.protocols.book_repository import BookRepositoryProtocol
from booklens.domain.common.value_objects import BookId, UserId
from booklens.domain.library.entities.book import Book


class GetBooksUseCase:
    """Use case for reading a user's books."""

    def __init__(self, book_repository: BookRepositoryProtocol) -> None:
        self.book_repository = book_repository

    def get_book(self, book_id: int, user_id: int) -> Book | None:
        """
        Get a single book.

        Returns None both when the book does not exist and when it belongs
        to another user.
        """
        return self.book_repository.find_by_id(BookId(book_id), UserId(user_id))

    def list_books(self, user_id: int) -> list[Book]:
        """List the user's books, most recently updated first."""
        return self.book_repository.find_all_by_user(UserId(user_id))
