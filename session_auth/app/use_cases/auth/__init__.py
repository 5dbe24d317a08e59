"""
Authentication Use Cases

Registration, login and logout.
"""

from .register_use_case import RegisterUseCase
from .login_use_case import LoginUseCase
from .logout_use_case import LogoutUseCase
from .dtos import (
    RegisterCommand,
    PublicUser,
    AuthResponse,
    SuccessResponse,
    to_public_user,
)

__all__ = [
    # Use Cases
    "RegisterUseCase",
    "LoginUseCase",
    "LogoutUseCase",
    # DTOs - Commands
    "RegisterCommand",
    # DTOs - Responses
    "PublicUser",
    "AuthResponse",
    "SuccessResponse",
    # Helpers
    "to_public_user",
]
