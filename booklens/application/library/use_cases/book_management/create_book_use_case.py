"""Create book use case."""

from dataclasses import asdict, dataclass

import structlog

from booklens.application.common.unit_of_work import UnitOfWork
from booklens.application.library.protocols.book_repository import BookRepositoryProtocol
from booklens.domain.common.exceptions import DomainError
from booklens.domain.common.value_objects import UserId
from booklens.domain.library.entities.book import Book
from booklens.exceptions import ValidationError

logger = structlog.get_logger(__name__)


@dataclass
class BookCreateData:
    """DTO for book creation from API."""

    title: str
    author: str
    total_page: int
    read_page: int = 0
    progress: float | None = None
    status: str | None = None
    publisher: str | None = None
    publish_date: str | None = None
    start_date: str | None = None
    completed_date: str | None = None
    memo: str | None = None
    thumbnail: str | None = None
    isbn: str | None = None


class CreateBookUseCase:
    """Use case for adding a book to a user's library."""

    def __init__(
        self,
        book_repository: BookRepositoryProtocol,
        unit_of_work: UnitOfWork,
    ) -> None:
        self.book_repository = book_repository
        self.unit_of_work = unit_of_work

    def create_book(self, data: BookCreateData, user_id: int) -> Book:
        """
        Create a book with its initial progress derived from the page counts.

        Args:
            data: Book fields supplied by the caller
            user_id: ID of the owning user

        Returns:
            The persisted Book

        Raises:
            ValidationError: If title/author are empty or page counts are negative
        """
        try:
            book = Book.create(user_id=UserId(user_id), **asdict(data))
        except DomainError as e:
            raise ValidationError(str(e)) from e

        with self.unit_of_work:
            saved = self.book_repository.save(book)
            self.unit_of_work.commit()

        logger.info(
            "book_created",
            book_id=saved.id.value,
            user_id=user_id,
            total_page=saved.total_page,
            status=saved.status.value,
        )
        return saved
