import logging
import secrets
from datetime import datetime, timedelta
from uuid import UUID

from pydantic import BaseModel

from session_auth.app.services.unit_of_work import UnitOfWork
from session_auth.domain.base import utc_now
from session_auth.domain.entities import Session

logger = logging.getLogger(__name__)

SESSION_TTL = timedelta(hours=24)
TOKEN_BYTES = 32  # 256 bits


class IssuedSession(BaseModel):
    """Token and expiry handed back to the client"""

    token: str
    expires_at: datetime


class SessionIssuer:
    """
    Creates sessions inside the caller's unit of work.

    The caller owns the transaction: issue() only flushes, commit happens in
    the use case. A token collision surfaces as IntegrityError from the
    unique index and is never retried or overwritten.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def issue(self, user_id: UUID) -> IssuedSession:
        token = secrets.token_hex(TOKEN_BYTES)
        expires_at = utc_now() + SESSION_TTL

        session = Session(user_id=user_id, token=token, expires_at=expires_at)
        await self.uow.sessions.create(session)

        logger.info(f"Session issued for user {user_id}, expires at {expires_at.isoformat()}")
        return IssuedSession(token=token, expires_at=expires_at)
