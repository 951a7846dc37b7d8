from dataclasses import dataclass, fields, replace
from datetime import UTC, datetime
from decimal import ROUND_HALF_UP, Decimal
from enum import StrEnum
from typing import Any

from booklens.domain.common.entity import Entity
from booklens.domain.common.exceptions import InvariantViolationError
from booklens.domain.common.value_objects.ids import BookId, UserId

MAX_PROGRESS = Decimal(100)
PROGRESS_QUANTUM = Decimal("0.01")
# Counters are stored in 32-bit integer columns
MAX_COUNTER = 2_147_483_647


class BookStatus(StrEnum):
    """Reading status of a book."""

    NOT_STARTED = "NOT_STARTED"
    READING = "READING"
    COMPLETED = "COMPLETED"

    @classmethod
    def from_api(cls, value: str | None) -> "BookStatus | None":
        """Map an API status string; unknown or missing values map to None."""
        if not value:
            return None
        return _API_STATUSES.get(value)

    def to_api(self) -> str:
        return self.value.lower()


_API_STATUSES = {status.value.lower(): status for status in BookStatus}


def compute_progress(read_page: int, total_page: int, current: float = 0.0) -> float:
    """
    Percentage of the book read, rounded half-up to two decimals and capped at 100.

    With no total page count there is nothing to divide by, so the current
    value is kept.
    """
    if total_page <= 0:
        return current
    percent = (Decimal(read_page) * 100 / Decimal(total_page)).quantize(
        PROGRESS_QUANTUM, rounding=ROUND_HALF_UP
    )
    return float(min(MAX_PROGRESS, percent))


@dataclass
class Book(Entity[BookId]):
    """
    Book aggregate root.

    A reading target in a user's library. `progress` is derived from
    `read_page` and `total_page`; `read_page` itself is never clamped to
    `total_page`.
    """

    # Identity
    id: BookId
    user_id: UserId

    # Essential metadata
    title: str
    author: str

    # Timestamps
    created_at: datetime
    updated_at: datetime

    # Progress tracking
    total_page: int = 0
    read_page: int = 0
    progress: float = 0.0
    status: BookStatus = BookStatus.READING
    total_reading_time: int = 0

    # Optional fields
    publisher: str | None = None
    publish_date: str | None = None
    start_date: str | None = None
    completed_date: str | None = None
    memo: str | None = None
    thumbnail: str | None = None
    isbn: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.title or not self.title.strip():
            raise InvariantViolationError("Book", "title", "Book title cannot be empty")
        if not self.author or not self.author.strip():
            raise InvariantViolationError("Book", "author", "Book author cannot be empty")
        if self.total_page < 0:
            raise InvariantViolationError("Book", "total_page", "Total pages cannot be negative")
        if self.read_page < 0:
            raise InvariantViolationError("Book", "read_page", "Read pages cannot be negative")
        if self.total_reading_time < 0:
            raise InvariantViolationError(
                "Book", "total_reading_time", "Total reading time cannot be negative"
            )
        for name in ("total_page", "read_page", "total_reading_time"):
            if getattr(self, name) > MAX_COUNTER:
                raise InvariantViolationError("Book", name, f"{name} is too large")
        if not 0 <= self.progress <= 100:
            raise InvariantViolationError(
                "Book", "progress", "Progress must be between 0 and 100"
            )

    # Command methods
    def record_reading(self, pages_read: int, duration_seconds: int) -> None:
        """
        Apply one reading session to the book's counters.

        Status is left alone: finishing the page count does not mark the
        book completed.
        """
        if pages_read < 0:
            raise InvariantViolationError("Book", "read_page", "Pages read cannot be negative")
        if duration_seconds < 0:
            raise InvariantViolationError(
                "Book", "total_reading_time", "Duration cannot be negative"
            )
        if self.read_page + pages_read > MAX_COUNTER:
            raise InvariantViolationError("Book", "read_page", "read_page is too large")
        if self.total_reading_time + duration_seconds > MAX_COUNTER:
            raise InvariantViolationError(
                "Book", "total_reading_time", "total_reading_time is too large"
            )
        self.read_page += pages_read
        self.total_reading_time += duration_seconds
        self.progress = compute_progress(self.read_page, self.total_page, self.progress)
        self.updated_at = datetime.now(UTC)

    def revise(self, changes: dict[str, Any], status: str | None = None) -> None:
        """
        Merge edited fields over the current state.

        `None` values are ignored. Progress is recomputed from the page
        counters unless the caller supplied it explicitly. The whole set of
        changes is validated before any field is touched.
        """
        editable = {f.name for f in fields(self)} - {"id", "user_id", "created_at", "updated_at"}
        values = {k: v for k, v in changes.items() if k in editable and v is not None}
        values.pop("status", None)
        for name in ("title", "author"):
            if isinstance(values.get(name), str):
                values[name] = values[name].strip()

        if "progress" not in values:
            values["progress"] = compute_progress(
                values.get("read_page", self.read_page),
                values.get("total_page", self.total_page),
                self.progress,
            )

        new_status = BookStatus.from_api(status)
        if new_status is not None:
            values["status"] = new_status
        values["updated_at"] = datetime.now(UTC)

        # Validates the merged state before any field is assigned
        replace(self, **values)

        for name, value in values.items():
            setattr(self, name, value)

    # Factory methods
    @classmethod
    def create(
        cls,
        user_id: UserId,
        title: str,
        author: str,
        total_page: int,
        read_page: int = 0,
        progress: float | None = None,
        status: str | None = None,
        publisher: str | None = None,
        publish_date: str | None = None,
        start_date: str | None = None,
        completed_date: str | None = None,
        memo: str | None = None,
        thumbnail: str | None = None,
        isbn: str | None = None,
    ) -> "Book":
        """
        Factory for creating new book.

        A supplied `progress` only applies when there is no page count to
        derive it from.
        """
        now = datetime.now(UTC)
        initial_status = BookStatus.from_api(status)
        if initial_status is None:
            initial_status = BookStatus.READING
        return cls(
            id=BookId.generate(),
            user_id=user_id,
            title=title.strip() if title else title,
            author=author.strip() if author else author,
            total_page=total_page,
            read_page=read_page,
            progress=compute_progress(read_page, total_page, progress or 0.0),
            status=initial_status,
            total_reading_time=0,
            publisher=publisher,
            publish_date=publish_date,
            start_date=start_date,
            completed_date=completed_date,
            memo=memo,
            thumbnail=thumbnail,
            isbn=isbn,
            created_at=now,
            updated_at=now,
        )
