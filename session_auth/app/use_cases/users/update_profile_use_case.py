"""
Update Profile Use Case

Applies a partial update to a user's email and names.
"""

import logging
from uuid import UUID

from sqlalchemy.exc import IntegrityError

from session_auth.libs.result import Error, Result, Return
from session_auth.app.services.unit_of_work import UnitOfWork
from session_auth.app.use_cases.auth.dtos import PublicUser, to_public_user
from session_auth.domain.base import normalize_email
from .dtos import UpdateProfileCommand

logger = logging.getLogger(__name__)


class UpdateProfileUseCase:
    """
    Use case for updating a user's profile.

    Business Rules:
    - User must exist
    - A new email must not belong to another user (unique index decides)
    - Only the fields set on the command are written
    - updated_at is refreshed; created_at and is_active are never touched

    The caller's right to edit user_id is checked by the API layer before
    this use case runs.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, command: UpdateProfileCommand
    ) -> Result[PublicUser]:
        """
        Execute update profile use case.

        Args:
            user_id: User to update (already verified as the caller)
            command: Fields to change

        Returns:
            Result with the updated PublicUser, or Error
            (USER_NOT_FOUND, EMAIL_TAKEN)
        """
        changes = command.changes()
        if "email" in changes:
            changes["email"] = normalize_email(changes["email"])

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            if "email" in changes and changes["email"] != user.email:
                if await self.uow.users.email_taken_by_other(changes["email"], user.id):
                    return Return.err(Error("EMAIL_TAKEN", "Email is already taken"))

            for field, value in changes.items():
                setattr(user, field, value)
            user.touch()

            try:
                user = await self.uow.users.update(user)
            except IntegrityError:
                logger.warning(f"Profile update for user {user_id} lost a race on email")
                return Return.err(Error("EMAIL_TAKEN", "Email is already taken"))

            await self.uow.commit()

            logger.info(f"User {user_id} updated profile fields {sorted(changes)}")
            return Return.ok(to_public_user(user))
