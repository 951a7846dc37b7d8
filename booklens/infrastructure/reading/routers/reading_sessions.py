"""API routes for recording reading sessions and browsing the reading calendar."""

import logging

from fastapi import APIRouter, Depends, Query, status

from booklens.application.reading.use_cases.reading_sessions import (
    ReadingCalendarUseCase,
    ReadingSessionRecordData,
    RecordReadingSessionUseCase,
)
from booklens.core import container
from booklens.infrastructure.common.di import inject_use_case
from booklens.infrastructure.identity.dependencies import CurrentUser
from booklens.infrastructure.reading.schemas import (
    CalendarResponse,
    DayActivityResponse,
    DayResponse,
    MessageResponse,
    ReadingSessionSaveRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reading-sessions", tags=["reading_sessions"])

SAVED_MESSAGE = "Reading session saved"


@router.post("/save", response_model=MessageResponse, status_code=status.HTTP_200_OK)
def save_reading_session(
    request: ReadingSessionSaveRequest,
    current_user: CurrentUser,
    use_case: RecordReadingSessionUseCase = Depends(
        inject_use_case(container.record_reading_session_use_case)
    ),
) -> MessageResponse:
    """
    Record a finished reading session.

    The book's read pages and total reading time grow by the session's
    values. Fetch the book again to see its new progress.
    """
    use_case.record_session(
        ReadingSessionRecordData(
            book_id=request.book_id,
            start_time=request.start_time,
            duration_seconds=request.duration,
            pages_read=request.pages_read,
        ),
        current_user.value,
    )
    return MessageResponse(message=SAVED_MESSAGE)


@router.get("/calendar", response_model=CalendarResponse, status_code=status.HTTP_200_OK)
def get_reading_calendar(
    current_user: CurrentUser,
    year: int | None = Query(None, description="Defaults to the current year"),
    month: int | None = Query(None, description="1-12, defaults to the current month"),
    use_case: ReadingCalendarUseCase = Depends(
        inject_use_case(container.reading_calendar_use_case)
    ),
) -> CalendarResponse:
    """Reading activity of a month, keyed by YYYY-MM-DD. Days without reading are absent."""
    days = use_case.get_month(current_user.value, year, month)
    return CalendarResponse(
        data={day: DayActivityResponse.from_activity(activity) for day, activity in days.items()}
    )


@router.get("/date", response_model=DayResponse, status_code=status.HTTP_200_OK)
def get_reading_day(
    current_user: CurrentUser,
    date: str = Query(..., description="YYYY-MM-DD"),
    use_case: ReadingCalendarUseCase = Depends(
        inject_use_case(container.reading_calendar_use_case)
    ),
) -> DayResponse:
    """Reading activity of a single day."""
    activity = use_case.get_day(current_user.value, date)
    return DayResponse(data=DayActivityResponse.from_activity(activity))
