"""
Unit of Work interface.

Groups the writes of one use case into a single all-or-nothing transaction.

Example:
    class DeleteBookUseCase:
        def delete_book(self, book_id: int, user_id: int) -> bool:
            with self.unit_of_work:
                ...
                self.unit_of_work.commit()
"""

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Self


class UnitOfWork(ABC):
    """
    Unit of Work interface (Port).

    Used as a context manager: leaving the block with an exception rolls
    back everything written inside it. Commit is always explicit.
    """

    @abstractmethod
    def commit(self) -> None:
        """Commit the current transaction."""
        raise NotImplementedError

    @abstractmethod
    def rollback(self) -> None:
        """Discard all changes made within the unit of work."""
        raise NotImplementedError

    def __enter__(self) -> Self:
        """Enter the unit of work context."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Rollback if the block raised. Otherwise do nothing."""
        if exc_type is not None:
            self.rollback()
