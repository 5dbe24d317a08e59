from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from session_auth.domain.entities import User


class IUserRepository(ABC):
    """User repository interface - application layer"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by (normalized) email address"""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def email_taken_by_other(self, email: str, user_id: UUID) -> bool:
        """True if a user other than user_id owns the email"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a new user. Raises IntegrityError if the email is taken."""
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """Update existing user. Raises IntegrityError if the email is taken."""
        pass
