"""
Login Use Case

Verifies email and password and issues a new session.
"""

import logging

from session_auth.libs.result import Error, Result, Return
from session_auth.app.services import password_hasher
from session_auth.app.services.session_issuer import SessionIssuer
from session_auth.app.services.unit_of_work import UnitOfWork
from session_auth.domain.base import normalize_email
from .dtos import AuthResponse, to_public_user

logger = logging.getLogger(__name__)


class LoginUseCase:
    """
    Use case for user login and session issuance.

    Business Rules:
    - Unknown email and wrong password yield the same INVALID_CREDENTIALS
    - A password check runs even for unknown emails (constant work)
    - Disabled accounts are rejected with ACCOUNT_DEACTIVATED
    - Every successful login creates one new session (multi-device)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, email: str, password: str) -> Result[AuthResponse]:
        """
        Execute login use case.

        Args:
            email: User email
            password: Plain text password

        Returns:
            Result with AuthResponse containing the session token, or Error
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(normalize_email(email))

            if user is None:
                password_hasher.matches(password, password_hasher.dummy_verifier())
                logger.warning("Login failed: invalid credentials")
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            if not user.is_active:
                logger.warning(f"Login rejected for deactivated user {user.id}")
                return Return.err(
                    Error("ACCOUNT_DEACTIVATED", "Account is deactivated")
                )

            if not password_hasher.matches(password, user.password_verifier):
                logger.warning("Login failed: invalid credentials")
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            issued = await SessionIssuer(self.uow).issue(user.id)

            await self.uow.commit()

            logger.info(f"User {user.id} logged in")
            return Return.ok(
                AuthResponse(
                    user=to_public_user(user),
                    token=issued.token,
                    expires_at=issued.expires_at,
                )
            )
