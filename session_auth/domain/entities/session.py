"""
Session Entity

A bearer token granting time-bounded access as one user.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from session_auth.domain.base import utc_now


class Session(SQLModel, table=True):
    """
    Session entity - the session store record.

    Business Rules:
    - Token is 256 bits from a CSPRNG and unique across all sessions
    - Expired when now >= expires_at (24 hours after issuance)
    - Never updated in place: deleted by logout, bulk-deleted by password change
    - Deleted together with its user (ON DELETE CASCADE)
    """

    __tablename__ = "sessions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(
        foreign_key="users.id", ondelete="CASCADE", nullable=False, index=True
    )
    token: str = Field(unique=True, index=True, max_length=64)

    # Timestamps
    created_at: datetime = Field(
        default_factory=utc_now, sa_column=Column(DateTime, nullable=False)
    )
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))

    __table_args__ = (Index("idx_session_expires_at", "expires_at"),)
