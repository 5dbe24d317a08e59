"""
Session Use Cases

Token validation shared by getCurrentUser, validateSession and every
protected route.
"""

from .authenticate_session_use_case import AuthenticateSessionUseCase

__all__ = [
    "AuthenticateSessionUseCase",
]
