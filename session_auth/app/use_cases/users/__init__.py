"""
User Management Use Cases

Profile and password changes for an authenticated user.
"""

from .update_profile_use_case import UpdateProfileUseCase
from .change_password_use_case import ChangePasswordUseCase
from .dtos import UpdateProfileCommand

__all__ = [
    "UpdateProfileUseCase",
    "ChangePasswordUseCase",
    "UpdateProfileCommand",
]
