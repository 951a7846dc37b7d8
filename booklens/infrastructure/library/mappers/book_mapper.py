from booklens.domain.common.value_objects import BookId, UserId
from booklens.domain.library.entities.book import Book, BookStatus
from booklens.infrastructure.common.timestamps import as_utc
from booklens.models import Book as BookORM


class BookMapper:
    """Mapper for Book ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: BookORM) -> Book:
        """Convert ORM model to domain entity."""
        return Book(
            id=BookId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            title=orm_model.title,
            author=orm_model.author,
            publisher=orm_model.publisher,
            publish_date=orm_model.publish_date,
            total_page=orm_model.total_page,
            read_page=orm_model.read_page,
            progress=orm_model.progress,
            status=BookStatus(orm_model.status),
            start_date=orm_model.start_date,
            completed_date=orm_model.completed_date,
            total_reading_time=orm_model.total_reading_time,
            memo=orm_model.memo,
            thumbnail=orm_model.thumbnail,
            isbn=orm_model.isbn,
            created_at=as_utc(orm_model.created_at),
            updated_at=as_utc(orm_model.updated_at),
        )

    def to_orm(self, domain_entity: Book, orm_model: BookORM | None = None) -> BookORM:
        """Convert domain entity to ORM model."""
        if orm_model is None:
            orm_model = BookORM(
                id=domain_entity.id.value if domain_entity.id.is_assigned else None,
                user_id=domain_entity.user_id.value,
                created_at=as_utc(domain_entity.created_at),
            )

        orm_model.title = domain_entity.title
        orm_model.author = domain_entity.author
        orm_model.publisher = domain_entity.publisher
        orm_model.publish_date = domain_entity.publish_date
        orm_model.total_page = domain_entity.total_page
        orm_model.read_page = domain_entity.read_page
        orm_model.progress = domain_entity.progress
        orm_model.status = domain_entity.status.value
        orm_model.start_date = domain_entity.start_date
        orm_model.completed_date = domain_entity.completed_date
        orm_model.total_reading_time = domain_entity.total_reading_time
        orm_model.memo = domain_entity.memo
        orm_model.thumbnail = domain_entity.thumbnail
        orm_model.isbn = domain_entity.isbn
        orm_model.updated_at = as_utc(domain_entity.updated_at)
        return orm_model
