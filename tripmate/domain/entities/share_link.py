"""
ShareLink Entity

Capability granting access to one trip to whoever holds the raw secret.
"""

from datetime import datetime
from uuid import UUID

from sqlmodel import Column, DateTime, Field, SQLModel

from tripmate.domain.base import utc_now


class ShareLink(SQLModel, table=True):
    """
    ShareLink entity - one share capability per trip.

    Business Rules:
    - trip_id is the primary key: at most one row per trip
    - token_hash is the SHA-256 hash of the raw secret; the raw secret is
      handed to the owner once and never stored
    - Regeneration overwrites token_hash in place, so the previous secret
      stops resolving
    """

    __tablename__ = "share_links"

    trip_id: UUID = Field(foreign_key="trips.id", primary_key=True)
    token_hash: str = Field(unique=True, index=True, max_length=64)  # SHA-256 output

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    def rotate(self, token_hash: str) -> None:
        self.token_hash = token_hash
        self.updated_at = utc_now()
