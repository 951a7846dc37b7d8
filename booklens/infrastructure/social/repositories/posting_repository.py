import logging

from sqlalchemy import update
from sqlalchemy.orm import Session

from booklens.domain.common.value_objects import BookId
from booklens.models import Posting as PostingORM

logger = logging.getLogger(__name__)


class PostingRepository:
    """Repository for the book reference held by postings."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def clear_book_reference(self, book_id: BookId) -> int:
        """
        Detach every posting from a book. The postings themselves are kept.

        Returns:
            Number of postings that referenced the book
        """
        result = self.db.execute(
            update(PostingORM)
            .where(PostingORM.book_id == book_id.value)
            .values(book_id=None)
            .execution_options(synchronize_session="fetch")
        )
        logger.debug("Cleared book %s from %s postings", book_id.value, result.rowcount)
        return result.rowcount
