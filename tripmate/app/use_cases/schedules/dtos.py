"""
Schedule DTOs
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from tripmate.domain.entities import Schedule


class ScheduleCommand(BaseModel):
    title: str
    start_date_time: datetime
    end_date_time: datetime
    memo: str = ""


class ScheduleUpdateCommand(BaseModel):
    """Partial update: only supplied fields change"""

    title: Optional[str] = None
    start_date_time: Optional[datetime] = None
    end_date_time: Optional[datetime] = None
    memo: Optional[str] = None


class ScheduleResponse(BaseModel):
    id: str
    trip_id: str
    title: str
    start_date_time: datetime
    end_date_time: datetime
    memo: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, schedule: Schedule) -> "ScheduleResponse":
        return cls(
            id=str(schedule.id),
            trip_id=str(schedule.trip_id),
            title=schedule.title,
            start_date_time=schedule.start_date_time,
            end_date_time=schedule.end_date_time,
            memo=schedule.memo,
            created_at=schedule.created_at,
            updated_at=schedule.updated_at,
        )
