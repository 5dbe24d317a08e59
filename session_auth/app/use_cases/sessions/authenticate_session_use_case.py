"""
Authenticate Session Use Case

Resolves a bearer token to the public profile of its user.
"""

from session_auth.libs.result import Error, Result, Return
from session_auth.app.services.unit_of_work import UnitOfWork
from session_auth.app.use_cases.auth.dtos import PublicUser, to_public_user
from session_auth.domain.base import utc_now


class AuthenticateSessionUseCase:
    """
    Use case for validating a session token.

    Pipeline (each stage either proceeds or fails terminally):
    1. Lookup: no session for the token -> INVALID_SESSION
    2. Expiry: now >= expires_at -> INVALID_SESSION
    3. Active: user.is_active is False -> ACCOUNT_INACTIVE
    4. Success: PublicUser of the session's user

    Unknown and expired tokens produce the same error. Nothing is cached;
    every call reads the store.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, token: str) -> Result[PublicUser]:
        async with self.uow:
            row = await self.uow.sessions.get_with_user_by_token(token)
            if row is None:
                return Return.err(
                    Error("INVALID_SESSION", "Invalid or expired session token")
                )

            session, user = row

            if utc_now() >= session.expires_at:
                return Return.err(
                    Error("INVALID_SESSION", "Invalid or expired session token")
                )

            if not user.is_active:
                return Return.err(
                    Error("ACCOUNT_INACTIVE", "User account is inactive")
                )

            return Return.ok(to_public_user(user))
