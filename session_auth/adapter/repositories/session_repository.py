from typing import Optional, Tuple
from uuid import UUID

from sqlmodel import delete, select
from sqlmodel.ext.asyncio.session import AsyncSession

from session_auth.app.repositories.session_repository import ISessionRepository
from session_auth.domain.entities import Session, User


class SessionRepository(ISessionRepository):
    """Session repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, session_obj: Session) -> Session:
        """Create a new session"""
        self.session.add(session_obj)
        await self.session.flush()
        await self.session.refresh(session_obj)
        return session_obj

    async def get_with_user_by_token(
        self, token: str
    ) -> Optional[Tuple[Session, User]]:
        """
        Single join of sessions and users on the token.

        Expiry and the active flag are not filtered here; the authenticator
        checks them so it can tell an expired session from a disabled account.
        """
        stmt = (
            select(Session, User)
            .join(User, Session.user_id == User.id)
            .where(Session.token == token)
        )
        result = await self.session.execute(stmt)
        row = result.one_or_none()
        if row is None:
            return None
        return row[0], row[1]

    async def delete_by_token(self, token: str) -> bool:
        """Delete a specific session by token"""
        stmt = delete(Session).where(Session.token == token)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def delete_all_by_user_id(self, user_id: UUID) -> int:
        """Delete every session of a user"""
        stmt = delete(Session).where(Session.user_id == user_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
