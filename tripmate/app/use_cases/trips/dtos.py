"""
Trip DTOs
"""

from datetime import date, datetime
from typing import List, Sequence

from pydantic import BaseModel, Field

from tripmate.app.use_cases.schedules.dtos import ScheduleResponse
from tripmate.domain.entities import Trip, TripMember


class TripCommand(BaseModel):
    """Fields of a trip as supplied on create and full update"""

    title: str
    start_date: date
    end_date: date
    members: List[str] = Field(default_factory=list)


class MemberResponse(BaseModel):
    id: str
    name: str

    @classmethod
    def from_entity(cls, member: TripMember) -> "MemberResponse":
        return cls(id=str(member.id), name=member.name)


class TripResponse(BaseModel):
    id: str
    title: str
    start_date: date
    end_date: date
    members: List[MemberResponse]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, trip: Trip, members: Sequence[TripMember] = ()) -> "TripResponse":
        return cls(
            id=str(trip.id),
            title=trip.title,
            start_date=trip.start_date,
            end_date=trip.end_date,
            members=[MemberResponse.from_entity(m) for m in members],
            created_at=trip.created_at,
            updated_at=trip.updated_at,
        )


class TripDetailsResponse(TripResponse):
    """Trip together with its members and schedules"""

    schedules: List[ScheduleResponse]
