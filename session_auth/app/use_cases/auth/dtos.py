"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for the auth domain.
PublicUser is the only user shape that ever leaves the service.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from session_auth.domain.entities import User


# ============================================================================
# Command DTOs
# ============================================================================


class RegisterCommand(BaseModel):
    """
    Register command - represents validated registration intent

    Created by API layer after request validation passes.
    """

    email: str
    password: str
    first_name: str
    last_name: str


# ============================================================================
# Response DTOs
# ============================================================================


class PublicUser(BaseModel):
    """User projection without the password verifier"""

    id: UUID
    email: str
    first_name: str
    last_name: str
    is_active: bool
    created_at: datetime
    updated_at: datetime


class AuthResponse(BaseModel):
    """Response for register and login use cases"""

    user: PublicUser
    token: str
    expires_at: datetime


class SuccessResponse(BaseModel):
    """Response for operations that only report success"""

    success: bool


def to_public_user(user: User) -> PublicUser:
    return PublicUser(
        id=user.id,
        email=user.email,
        first_name=user.first_name,
        last_name=user.last_name,
        is_active=user.is_active,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )
