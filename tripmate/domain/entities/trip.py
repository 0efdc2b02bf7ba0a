"""
Trip Entity

A trip owned by exactly one user.
"""

from datetime import date, datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from tripmate.domain.base import utc_now


class Trip(SQLModel, table=True):
    """
    Trip entity - the resource guarded by ownership and share links.

    Business Rules:
    - user_id (owner) is set at creation and never changes
    - end_date must not precede start_date
    - Deleting a trip deletes its members, schedules and share link
    """

    __tablename__ = "trips"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: UUID = Field(foreign_key="users.id", index=True)

    title: str = Field(max_length=255)
    start_date: date
    end_date: date

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    def is_owned_by(self, user_id: UUID) -> bool:
        return self.user_id == user_id
