from abc import ABC, abstractmethod
from typing import Optional, Tuple
from uuid import UUID

from session_auth.domain.entities import Session, User


class ISessionRepository(ABC):
    """Session repository interface - application layer"""

    @abstractmethod
    async def create(self, session: Session) -> Session:
        """Create a new session. Raises IntegrityError on token collision."""
        pass

    @abstractmethod
    async def get_with_user_by_token(
        self, token: str
    ) -> Optional[Tuple[Session, User]]:
        """Get the session for a token joined with its owning user"""
        pass

    @abstractmethod
    async def delete_by_token(self, token: str) -> bool:
        """Delete the session for a token. Returns True if a row was deleted."""
        pass

    @abstractmethod
    async def delete_all_by_user_id(self, user_id: UUID) -> int:
        """Delete all sessions for a user. Returns count of deleted sessions."""
        pass
