import logging

from session_auth.libs.result import Result, Return
from session_auth.app.services.unit_of_work import UnitOfWork
from .dtos import SuccessResponse

logger = logging.getLogger(__name__)


class LogoutUseCase:
    """
    Deletes the session behind a token.

    Always succeeds: an unknown, expired or already consumed token is not an
    error, so the response says nothing about which tokens exist.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, token: str) -> Result[SuccessResponse]:
        async with self.uow:
            deleted = await self.uow.sessions.delete_by_token(token)
            await self.uow.commit()

        if deleted:
            logger.info("Session logged out")
        return Return.ok(SuccessResponse(success=True))
