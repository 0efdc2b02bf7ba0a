"""
Authentication Use Cases

Signup, email verification and login.
"""

from .signup_use_case import SignupUseCase
from .verify_email_use_case import VerifyEmailUseCase
from .login_use_case import LoginUseCase
from .dtos import (
    SignupCommand,
    UserResponse,
    VerifyEmailResponse,
    LoginResponse,
)

__all__ = [
    # Use Cases
    "SignupUseCase",
    "VerifyEmailUseCase",
    "LoginUseCase",
    # DTOs - Commands
    "SignupCommand",
    # DTOs - Responses
    "UserResponse",
    "VerifyEmailResponse",
    "LoginResponse",
]
