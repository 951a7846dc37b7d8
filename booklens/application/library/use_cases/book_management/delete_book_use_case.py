"""Delete book use case."""

import structlog

from booklens.application.common.unit_of_work import UnitOfWork
from booklens.application.library.protocols.book_repository import BookRepositoryProtocol
from booklens.application.library.protocols.posting_repository import (
    PostingRepositoryProtocol,
)
from booklens.application.reading.protocols.reading_session_repository import (
    ReadingSessionRepositoryProtocol,
)
from booklens.domain.common.value_objects import BookId, UserId

logger = structlog.get_logger(__name__)


class DeleteBookUseCase:
    """
    Use case for deleting a book together with its dependents.

    Reading sessions belong to the book and are deleted with it. Postings
    only point at the book: they keep existing, with the reference cleared.
    """

    def __init__(
        self,
        book_repository: BookRepositoryProtocol,
        reading_session_repository: ReadingSessionRepositoryProtocol,
        posting_repository: PostingRepositoryProtocol,
        unit_of_work: UnitOfWork,
    ) -> None:
        self.book_repository = book_repository
        self.reading_session_repository = reading_session_repository
        self.posting_repository = posting_repository
        self.unit_of_work = unit_of_work

    def delete_book(self, book_id: int, user_id: int) -> bool:
        """
        Delete a book in a single transaction.

        Steps, in order: delete the book's reading sessions, clear the book
        reference on postings, delete the book. A failure in any step rolls
        back all of them.

        Args:
            book_id: ID of the book to delete
            user_id: ID of the user

        Returns:
            True if the book was deleted, False if it does not exist or is not owned by the user
        """
        with self.unit_of_work:
            book = self.book_repository.find_by_id(
                BookId(book_id), UserId(user_id), for_update=True
            )
            if not book:
                return False

            sessions_deleted = self.reading_session_repository.delete_by_book_id(book.id)
            postings_detached = self.posting_repository.clear_book_reference(book.id)
            self.book_repository.delete(book)
            self.unit_of_work.commit()

        logger.info(
            "book_deleted",
            book_id=book_id,
            user_id=user_id,
            sessions_deleted=sessions_deleted,
            postings_detached=postings_detached,
        )
        return True
