from zoneinfo import ZoneInfo

from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from booklens.application.library.use_cases.book_management import (
    CreateBookUseCase,
    DeleteBookUseCase,
    UpdateBookUseCase,
)
from booklens.application.library.use_cases.book_queries import GetBooksUseCase
from booklens.application.reading.use_cases.reading_sessions import (
    ReadingCalendarUseCase,
    RecordReadingSessionUseCase,
)
from booklens.config import get_settings
from booklens.domain.reading.services import ReadingCalendarService
from booklens.infrastructure.common.unit_of_work import SQLAlchemyUnitOfWork
from booklens.infrastructure.library.repositories import BookRepository
from booklens.infrastructure.reading.repositories import ReadingSessionRepository
from booklens.infrastructure.social.repositories import PostingRepository


def _reading_zone() -> ZoneInfo:
    return get_settings().reading_zone


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    # Repositories
    book_repository = providers.Factory(BookRepository, db=db)
    reading_session_repository = providers.Factory(ReadingSessionRepository, db=db)
    posting_repository = providers.Factory(PostingRepository, db=db)
    unit_of_work = providers.Factory(SQLAlchemyUnitOfWork, db=db)

    # Domain services (pure domain logic, no db)
    reading_calendar_service = providers.Factory(ReadingCalendarService)

    # Library module, application use cases
    get_books_use_case = providers.Factory(GetBooksUseCase, book_repository=book_repository)
    create_book_use_case = providers.Factory(
        CreateBookUseCase,
        book_repository=book_repository,
        unit_of_work=unit_of_work,
    )
    update_book_use_case = providers.Factory(
        UpdateBookUseCase,
        book_repository=book_repository,
        unit_of_work=unit_of_work,
    )
    delete_book_use_case = providers.Factory(
        DeleteBookUseCase,
        book_repository=book_repository,
        reading_session_repository=reading_session_repository,
        posting_repository=posting_repository,
        unit_of_work=unit_of_work,
    )

    # Reading module, application use cases
    record_reading_session_use_case = providers.Factory(
        RecordReadingSessionUseCase,
        book_repository=book_repository,
        reading_session_repository=reading_session_repository,
        unit_of_work=unit_of_work,
    )
    reading_calendar_use_case = providers.Factory(
        ReadingCalendarUseCase,
        reading_session_repository=reading_session_repository,
        calendar_service=reading_calendar_service,
        zone=providers.Callable(_reading_zone),
    )


container = Container()
