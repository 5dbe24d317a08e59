"""
Use Cases

Organized into domain folders:
- auth/: registration, login, logout
- sessions/: session token validation
- users/: profile and password management
"""

from .auth import (
    RegisterUseCase,
    RegisterCommand,
    LoginUseCase,
    LogoutUseCase,
    PublicUser,
    AuthResponse,
    SuccessResponse,
)
from .sessions import (
    AuthenticateSessionUseCase,
)
from .users import (
    UpdateProfileUseCase,
    UpdateProfileCommand,
    ChangePasswordUseCase,
)

__all__ = [
    # Auth
    "RegisterUseCase",
    "RegisterCommand",
    "LoginUseCase",
    "LogoutUseCase",
    "PublicUser",
    "AuthResponse",
    "SuccessResponse",
    # Sessions
    "AuthenticateSessionUseCase",
    # Users
    "UpdateProfileUseCase",
    "UpdateProfileCommand",
    "ChangePasswordUseCase",
]
