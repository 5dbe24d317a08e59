"""
Change Password Use Case

Replaces a user's password and signs them out everywhere.
"""

import logging
from uuid import UUID

from session_auth.libs.result import Error, Result, Return
from session_auth.app.services import password_hasher
from session_auth.app.services.unit_of_work import UnitOfWork
from session_auth.app.use_cases.auth.dtos import SuccessResponse

logger = logging.getLogger(__name__)


class ChangePasswordUseCase:
    """
    Use case for changing a password.

    Business Rules:
    - User must exist
    - Current password must match the stored verifier
    - New password is hashed with bcrypt
    - All sessions of the user are deleted (re-login on every device)
    - Reusing the current password as the new one is allowed
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, current_password: str, new_password: str
    ) -> Result[SuccessResponse]:
        """
        Execute change password use case.

        Args:
            user_id: Authenticated user
            current_password: Password the user believes is current
            new_password: Replacement password

        Returns:
            Result with success, or Error (USER_NOT_FOUND, INCORRECT_PASSWORD)
        """
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            if not password_hasher.matches(current_password, user.password_verifier):
                logger.warning(f"Password change rejected for user {user_id}")
                return Return.err(
                    Error("INCORRECT_PASSWORD", "Current password is incorrect")
                )

            user.password_verifier = password_hasher.derive(new_password)
            user.touch()
            await self.uow.users.update(user)

            revoked_count = await self.uow.sessions.delete_all_by_user_id(user.id)

            await self.uow.commit()

            logger.info(
                f"User {user_id} changed password, {revoked_count} session(s) revoked"
            )
            return Return.ok(SuccessResponse(success=True))
