from datetime import UTC, datetime
from typing import Optional

from tripmate.domain.errors import ErrorCode
from tripmate.libs.result import Error


def to_naive_utc(value: datetime) -> datetime:
    """DateTime columns store naive UTC"""
    if value.tzinfo is None:
        return value
    return value.astimezone(UTC).replace(tzinfo=None)


def validate_schedule_window(start: datetime, end: datetime) -> Optional[Error]:
    if to_naive_utc(end) <= to_naive_utc(start):
        return Error(
            ErrorCode.VALIDATION_ERROR, "end_date_time must be after start_date_time"
        )
    return None
