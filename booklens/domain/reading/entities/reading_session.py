"""
ReadingSession entity.
"""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from booklens.domain.common.entity import Entity
from booklens.domain.common.exceptions import InvariantViolationError
from booklens.domain.common.value_objects import BookId, ReadingSessionId, UserId

ONE_SECOND = timedelta(seconds=1)


@dataclass
class ReadingSession(Entity[ReadingSessionId]):
    """
    Reading session entity.

    Immutable record of a contiguous stretch of reading on one book.

    Business Rules:
    - End time is start time plus the caller-reported duration
    - End time is never before start time
    - Pages read is never negative
    """

    # Identity
    id: ReadingSessionId
    user_id: UserId
    book_id: BookId

    # Time tracking
    start_time: datetime
    end_time: datetime

    pages_read: int = 0
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.end_time < self.start_time:
            raise InvariantViolationError(
                "ReadingSession", "end_time", "End time must not be before start time"
            )
        if self.pages_read < 0:
            raise InvariantViolationError(
                "ReadingSession", "pages_read", "Pages read cannot be negative"
            )

    @property
    def duration_seconds(self) -> int:
        """Whole seconds between start and end, rounded down."""
        return (self.end_time - self.start_time) // ONE_SECOND

    @classmethod
    def create(
        cls,
        user_id: UserId,
        book_id: BookId,
        start_time: datetime,
        duration_seconds: int,
        pages_read: int,
    ) -> "ReadingSession":
        """
        Factory method for recording a new reading session.

        Naive start times are taken to be UTC; aware ones are converted to it.

        Args:
            user_id: User who read
            book_id: Book that was read
            start_time: Session start time
            duration_seconds: Reported reading time
            pages_read: Pages advanced during the session

        Returns:
            New ReadingSession instance
        """
        if duration_seconds < 0:
            raise InvariantViolationError(
                "ReadingSession", "duration", "Duration cannot be negative"
            )
        if start_time.tzinfo is None:
            start_time = start_time.replace(tzinfo=UTC)
        try:
            start_time = start_time.astimezone(UTC)
            end_time = start_time + timedelta(seconds=duration_seconds)
        except OverflowError as e:
            raise InvariantViolationError(
                "ReadingSession", "end_time", "Session time is out of range"
            ) from e

        return cls(
            id=ReadingSessionId.generate(),
            user_id=user_id,
            book_id=book_id,
            start_time=start_time,
            end_time=end_time,
            pages_read=pages_read,
        )
