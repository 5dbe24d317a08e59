from typing import Optional

from fastapi import Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from session_auth.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from session_auth.api.error import ClientError
from session_auth.app.services.unit_of_work import UnitOfWork
from session_auth.app.use_cases.auth import PublicUser
from session_auth.app.use_cases.sessions import AuthenticateSessionUseCase
from session_auth.libs.result import Error


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """SQLite ignores ON DELETE CASCADE unless foreign keys are switched on per connection"""
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


engine = create_async_engine(
    ApplicationConfig.DB_URI, echo=ApplicationConfig.SQL_ECHO, future=True
)
enable_sqlite_foreign_keys(engine)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer(auto_error=False)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> PublicUser:
    """
    Dependency to authenticate the session token from the Authorization header.

    Args:
        credentials: Bearer token from Authorization header
        uow: Unit of work shared with the route for this request

    Returns:
        PublicUser of the caller, passed explicitly into protected routes

    Raises:
        ClientError: 401 if token is missing, unknown or expired,
            403 if the account is inactive
    """
    if credentials is None:
        raise ClientError(
            Error("INVALID_SESSION", "Invalid or expired session token"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    result = await AuthenticateSessionUseCase(uow).execute(credentials.credentials)

    if result.is_err():
        error = result.error
        if error.code == "ACCOUNT_INACTIVE":
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)

    return result.value
