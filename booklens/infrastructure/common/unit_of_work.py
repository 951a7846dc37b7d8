"""SQLAlchemy implementation of the unit of work."""

import logging
from types import TracebackType

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from booklens.application.common.unit_of_work import UnitOfWork
from booklens.exceptions import PersistenceError

logger = logging.getLogger(__name__)


class SQLAlchemyUnitOfWork(UnitOfWork):
    """Unit of work bound to the request-scoped session."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Rollback on error and surface store failures as PersistenceError."""
        super().__exit__(exc_type, exc_val, exc_tb)
        if isinstance(exc_val, SQLAlchemyError):
            logger.error("Transaction rolled back: %s", exc_val, exc_info=exc_val)
            raise PersistenceError from exc_val
