"""
User Account Use Cases

Operations an authenticated user performs on their own account.
"""

from .change_password_use_case import ChangePasswordUseCase
from .get_profile_use_case import GetProfileUseCase

__all__ = [
    "ChangePasswordUseCase",
    "GetProfileUseCase",
]
