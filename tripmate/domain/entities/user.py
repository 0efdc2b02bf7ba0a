"""
User Entity

Represents an account that owns trips.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from tripmate.domain.base import utc_now


class User(SQLModel, table=True):
    """
    User entity - an account moving from pending to active exactly once.

    Business Rules:
    - Email must be unique across all users
    - Pending while a verification token hash is present
    - Activation clears the verification token hash and expiry
    - Password stored as bcrypt hash; verification token as SHA-256 hash
    - State changes go through start_verification() / activate() only
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    is_active: bool = Field(default=False)

    verification_token_hash: Optional[str] = Field(
        default=None, unique=True, index=True, max_length=64
    )
    verification_token_expires_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime, nullable=True)
    )

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    @property
    def is_pending(self) -> bool:
        return self.verification_token_hash is not None

    def start_verification(
        self, password_hash: str, token_hash: str, expires_at: datetime
    ) -> None:
        """Put the account (back) into the pending state with fresh credentials"""
        self.password_hash = password_hash
        self.verification_token_hash = token_hash
        self.verification_token_expires_at = expires_at
        self.is_active = False
        self.updated_at = utc_now()

    def verification_expired(self, now: datetime) -> bool:
        if self.verification_token_expires_at is None:
            return True
        return now > self.verification_token_expires_at

    def activate(self) -> None:
        self.is_active = True
        self.verification_token_hash = None
        self.verification_token_expires_at = None
        self.updated_at = utc_now()

    def change_password(self, password_hash: str) -> None:
        self.password_hash = password_hash
        self.updated_at = utc_now()
