"""Mapper for ReadingSession ORM ↔ Domain conversion."""

from booklens.domain.common.value_objects import BookId, ReadingSessionId, UserId
from booklens.domain.reading.entities.reading_session import ReadingSession
from booklens.infrastructure.common.timestamps import as_utc
from booklens.models import ReadingSession as ReadingSessionORM


class ReadingSessionMapper:
    """Mapper for ReadingSession ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: ReadingSessionORM) -> ReadingSession:
        """
        Convert ORM model to domain entity.

        Uses the constructor directly (not the factory) for reconstitution.
        """
        return ReadingSession(
            id=ReadingSessionId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            book_id=BookId(orm_model.book_id),
            start_time=as_utc(orm_model.start_time),
            end_time=as_utc(orm_model.end_time),
            pages_read=orm_model.pages_read,
            created_at=as_utc(orm_model.created_at) if orm_model.created_at else None,
        )

    def to_orm(self, domain_entity: ReadingSession) -> ReadingSessionORM:
        """Convert a new domain entity to an ORM model. Sessions are never updated."""
        return ReadingSessionORM(
            id=domain_entity.id.value if domain_entity.id.is_assigned else None,
            user_id=domain_entity.user_id.value,
            book_id=domain_entity.book_id.value,
            start_time=as_utc(domain_entity.start_time),
            end_time=as_utc(domain_entity.end_time),
            pages_read=domain_entity.pages_read,
        )
