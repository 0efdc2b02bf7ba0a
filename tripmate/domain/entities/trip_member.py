"""
TripMember Entity

A named traveller on a trip. Members are plain names, not accounts.
"""

from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel


class TripMember(SQLModel, table=True):
    """
    TripMember entity - owned by its trip.

    Business Rules:
    - The member list of a trip is replaced as a whole on update
    - position keeps the order the names were supplied in
    - Deleting a trip deletes its members
    """

    __tablename__ = "trip_members"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    trip_id: UUID = Field(foreign_key="trips.id", index=True)

    name: str = Field(max_length=255)
    position: int = Field(default=0)
