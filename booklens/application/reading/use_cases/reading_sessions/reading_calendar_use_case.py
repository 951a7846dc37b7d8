"""Reading calendar queries."""

import re
from datetime import date, datetime, time, timedelta
from zoneinfo import ZoneInfo

from booklens.application.reading.protocols.reading_session_repository import (
    ReadingSessionRepositoryProtocol,
)
from booklens.domain.common.value_objects import UserId
from booklens.domain.reading.services.reading_calendar_service import (
    DayActivity,
    ReadingCalendarService,
)
from booklens.exceptions import ValidationError

DATE_FORMAT = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
MIN_YEAR = 1900
MAX_YEAR = 2100


class ReadingCalendarUseCase:
    """Use case for summarising reading activity per calendar day."""

    def __init__(
        self,
        reading_session_repository: ReadingSessionRepositoryProtocol,
        calendar_service: ReadingCalendarService,
        zone: ZoneInfo,
    ) -> None:
        self.reading_session_repository = reading_session_repository
        self.calendar_service = calendar_service
        self.zone = zone

    def get_month(
        self, user_id: int, year: int | None = None, month: int | None = None
    ) -> dict[str, DayActivity]:
        """
        Reading activity for every day of a month that has sessions.

        Omitted year or month default to the current one in the reading
        timezone. Sessions are bucketed by the UTC date they started on.

        Raises:
            ValidationError: If year is outside 1900-2100 or month outside 1-12
        """
        today = datetime.now(self.zone)
        year = today.year if year is None else year
        month = today.month if month is None else month

        if not MIN_YEAR <= year <= MAX_YEAR:
            raise ValidationError("Invalid year")
        if not 1 <= month <= 12:
            raise ValidationError("Invalid month")

        start = datetime(year, month, 1, tzinfo=self.zone)
        if month == 12:
            next_start = datetime(year + 1, 1, 1, tzinfo=self.zone)
        else:
            next_start = datetime(year, month + 1, 1, tzinfo=self.zone)
        end = next_start - timedelta(microseconds=1)

        rows = self.reading_session_repository.find_with_books_between(
            UserId(user_id), start, end
        )
        return self.calendar_service.group_by_day(rows)

    def get_day(self, user_id: int, day: str) -> DayActivity:
        """
        Reading activity for a single YYYY-MM-DD day in the reading timezone.

        Raises:
            ValidationError: If the date is malformed or not a real calendar date
        """
        if not DATE_FORMAT.fullmatch(day):
            raise ValidationError("Invalid date format. Use YYYY-MM-DD")
        try:
            parsed = date.fromisoformat(day)
        except ValueError as e:
            raise ValidationError("Invalid date") from e

        start = datetime.combine(parsed, time.min, tzinfo=self.zone)
        end = datetime.combine(parsed, time.max, tzinfo=self.zone)
        rows = self.reading_session_repository.find_with_books_between(
            UserId(user_id), start, end
        )
        return self.calendar_service.summarize_day(day, rows)

