"""
User Entity

Identity, profile and password verifier of a person who can sign in.
"""

from datetime import datetime, timedelta
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from session_auth.domain.base import utc_now


class User(SQLModel, table=True):
    """
    User entity - the credential store record.

    Business Rules:
    - Email is unique across all users (stored lower-cased)
    - password_verifier is a bcrypt hash and never leaves the service
    - is_active=False blocks login and session validation
    - created_at is immutable, updated_at is refreshed on every mutation
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    password_verifier: str = Field(max_length=60)  # Bcrypt output is 60 chars

    first_name: str = Field(max_length=50)
    last_name: str = Field(max_length=50)

    is_active: bool = Field(default=True)

    # Timestamps
    created_at: datetime = Field(
        default_factory=utc_now, sa_column=Column(DateTime, nullable=False)
    )
    updated_at: datetime = Field(
        default_factory=utc_now, sa_column=Column(DateTime, nullable=False)
    )

    __table_args__ = (Index("idx_user_is_active", "is_active"),)

    def touch(self) -> None:
        """Refresh updated_at; it never moves backwards, even within one clock tick"""
        now = utc_now()
        if now > self.updated_at:
            self.updated_at = now
        else:
            self.updated_at = self.updated_at + timedelta(microseconds=1)
