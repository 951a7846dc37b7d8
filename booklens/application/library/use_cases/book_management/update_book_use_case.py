"""Update book use case."""

from dataclasses import asdict, dataclass
from typing import Any

import structlog

from booklens.application.common.unit_of_work import UnitOfWork
from booklens.application.library.protocols.book_repository import BookRepositoryProtocol
from booklens.domain.common.exceptions import DomainError
from booklens.domain.common.value_objects import BookId, UserId
from booklens.domain.library.entities.book import Book
from booklens.exceptions import ValidationError

logger = structlog.get_logger(__name__)


@dataclass
class BookUpdateData:
    """DTO for a partial book edit. `None` means "leave unchanged"."""

    title: str | None = None
    author: str | None = None
    publisher: str | None = None
    publish_date: str | None = None
    total_page: int | None = None
    read_page: int | None = None
    progress: float | None = None
    status: str | None = None
    start_date: str | None = None
    completed_date: str | None = None
    total_reading_time: int | None = None
    memo: str | None = None
    thumbnail: str | None = None
    isbn: str | None = None

    def changes(self) -> dict[str, Any]:
        """Supplied fields other than status."""
        return {k: v for k, v in asdict(self).items() if k != "status" and v is not None}


class UpdateBookUseCase:
    """Use case for editing book information."""

    def __init__(
        self,
        book_repository: BookRepositoryProtocol,
        unit_of_work: UnitOfWork,
    ) -> None:
        self.book_repository = book_repository
        self.unit_of_work = unit_of_work

    def update_book(self, book_id: int, data: BookUpdateData, user_id: int) -> Book | None:
        """
        Merge the supplied fields over the stored book.

        Progress follows the page counters unless supplied explicitly, in
        which case the caller's value wins. Either every field is applied or
        none is.

        Args:
            book_id: ID of the book to update
            data: Fields to change
            user_id: ID of the user

        Returns:
            The updated Book, or None if it does not exist or is not owned by the user

        Raises:
            ValidationError: If the merged book would be invalid
        """
        with self.unit_of_work:
            book = self.book_repository.find_by_id(
                BookId(book_id), UserId(user_id), for_update=True
            )
            if not book:
                return None

            try:
                book.revise(data.changes(), status=data.status)
            except DomainError as e:
                raise ValidationError(str(e)) from e

            saved = self.book_repository.save(book)
            self.unit_of_work.commit()

        logger.info(
            "book_updated",
            book_id=book_id,
            user_id=user_id,
            fields=sorted(data.changes()),
            progress=saved.progress,
        )
        return saved
