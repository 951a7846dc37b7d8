"""
Domain-centric repository for the Book aggregate.

Returns domain entities instead of ORM models.
"""

import logging

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from booklens.domain.common.value_objects import BookId, UserId
from booklens.domain.library.entities.book import Book
from booklens.infrastructure.library.mappers.book_mapper import BookMapper
from booklens.models import Book as BookORM

logger = logging.getLogger(__name__)


class BookRepository:
    """Repository for Book persistence."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = BookMapper()

    def find_by_id(
        self, book_id: BookId, user_id: UserId, *, for_update: bool = False
    ) -> Book | None:
        """
        Find book by ID with user ownership check.

        With `for_update` the row stays locked until the surrounding
        transaction ends.
        """
        stmt = (
            select(BookORM)
            .where(BookORM.id == book_id.value)
            .where(BookORM.user_id == user_id.value)
        )
        if for_update:
            stmt = stmt.with_for_update().execution_options(populate_existing=True)

        orm_model = self.db.execute(stmt).scalar_one_or_none()
        if not orm_model:
            return None

        return self.mapper.to_domain(orm_model)

    def find_all_by_user(self, user_id: UserId) -> list[Book]:
        """All books owned by the user, most recently updated first."""
        stmt = (
            select(BookORM)
            .where(BookORM.user_id == user_id.value)
            .order_by(BookORM.updated_at.desc(), BookORM.created_at.desc(), BookORM.id.desc())
        )
        return [self.mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars()]

    def save(self, book: Book) -> Book:
        """Persist book to database."""
        if not book.id.is_assigned:
            orm_model = self.mapper.to_orm(book)
            self.db.add(orm_model)
            self.db.flush()
            return self.mapper.to_domain(orm_model)

        existing_orm = self.db.execute(
            select(BookORM).where(BookORM.id == book.id.value)
        ).scalar_one()
        self.mapper.to_orm(book, existing_orm)
        self.db.flush()
        return self.mapper.to_domain(existing_orm)

    def delete(self, book: Book) -> None:
        """
        Hard delete a book row.

        Dependents must already be removed or detached; see DeleteBookUseCase.
        """
        result = self.db.execute(delete(BookORM).where(BookORM.id == book.id.value))
        logger.debug("Deleted book %s (%s row)", book.id.value, result.rowcount)
