"""
Schedule Entity

A timed plan item inside a trip.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from tripmate.domain.base import utc_now


class Schedule(SQLModel, table=True):
    """Schedule entity - end_date_time must be after start_date_time"""

    __tablename__ = "schedules"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    trip_id: UUID = Field(foreign_key="trips.id", index=True)

    title: str = Field(max_length=255)
    start_date_time: datetime = Field(sa_column=Column(DateTime, nullable=False))
    end_date_time: datetime = Field(sa_column=Column(DateTime, nullable=False))
    memo: str = Field(default="")

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
