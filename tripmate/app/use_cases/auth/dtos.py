"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for the identity domain.
Provides type safety and clear contracts between layers.
"""

from datetime import datetime

from pydantic import BaseModel

from tripmate.domain.entities import User


# ============================================================================
# Command DTOs
# ============================================================================


class SignupCommand(BaseModel):
    """
    Signup command - represents signup intent

    No password is supplied: an initial password is generated and emailed
    together with the verification token.
    """

    name: str
    email: str


# ============================================================================
# Response DTOs
# ============================================================================


class UserResponse(BaseModel):
    """Public view of a user account (never exposes hashes)"""

    id: str
    name: str
    email: str
    is_active: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(
            id=str(user.id),
            name=user.name,
            email=user.email,
            is_active=user.is_active,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class VerifyEmailResponse(BaseModel):
    """Response for email verification use case"""

    status: str
    message: str


class LoginResponse(BaseModel):
    """Response for user login use case"""

    access_token: str
    token_type: str = "bearer"
    expires_in: int  # seconds until the access token expires
    user: UserResponse
