import logging

from sqlalchemy.exc import IntegrityError

from session_auth.libs.result import Error, Result, Return
from session_auth.app.services import password_hasher
from session_auth.app.services.session_issuer import SessionIssuer
from session_auth.app.services.unit_of_work import UnitOfWork
from session_auth.domain.base import normalize_email
from session_auth.domain.entities import User
from .dtos import AuthResponse, RegisterCommand, to_public_user

logger = logging.getLogger(__name__)


class RegisterUseCase:
    """
    Register Use Case

    Command/Response Pattern:
    - Input: RegisterCommand (validated business intent)
    - Output: Result[AuthResponse] (public user, session token, expiry)

    Business Logic:
    1. Reject an email that is already registered
    2. Derive the password verifier (bcrypt)
    3. Create User with is_active=True
    4. Issue a 24 hour session
    5. Commit transaction atomically

    The lookup in step 1 only short-circuits the common case. Two concurrent
    registrations can both pass it; the unique index on users.email rejects
    the second insert and that IntegrityError is reported as EMAIL_TAKEN.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: RegisterCommand) -> Result[AuthResponse]:
        """
        Execute register use case

        Args:
            command: RegisterCommand with validated email, password and names

        Returns:
            Result[AuthResponse] or Error(EMAIL_TAKEN) if the email exists
        """
        email = normalize_email(command.email)

        async with self.uow:
            existing_user = await self.uow.users.get_by_email(email)
            if existing_user:
                return Return.err(Error("EMAIL_TAKEN", "Email already registered"))

            user = User(
                email=email,
                password_verifier=password_hasher.derive(command.password),
                first_name=command.first_name,
                last_name=command.last_name,
                is_active=True,
            )
            try:
                user = await self.uow.users.create(user)
            except IntegrityError:
                logger.warning("Registration lost a race on a duplicate email")
                return Return.err(Error("EMAIL_TAKEN", "Email already registered"))

            issued = await SessionIssuer(self.uow).issue(user.id)

            await self.uow.commit()

            logger.info(f"User {user.id} registered")
            return Return.ok(
                AuthResponse(
                    user=to_public_user(user),
                    token=issued.token,
                    expires_at=issued.expires_at,
                )
            )
