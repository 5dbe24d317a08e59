from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from session_auth.api.error import ClientError, ServerError
from session_auth.app.services.unit_of_work import UnitOfWork
from session_auth.app.use_cases.auth import (
    AuthResponse,
    LoginUseCase,
    LogoutUseCase,
    PublicUser,
    RegisterCommand,
    RegisterUseCase,
    SuccessResponse,
)
from session_auth.app.use_cases.sessions import AuthenticateSessionUseCase
from session_auth.depends import get_unit_of_work

router = APIRouter(prefix="/auth", tags=["Authentication"])


class RegisterRequest(BaseModel):
    """
    Register HTTP request payload

    Validates incoming HTTP request before converting to RegisterCommand.
    """

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(
        ..., min_length=8, max_length=100, description="User password (8-100 chars)"
    )
    first_name: str = Field(..., min_length=1, max_length=50)
    last_name: str = Field(..., min_length=1, max_length=50)


@router.post(
    "/register", status_code=status.HTTP_201_CREATED, response_model=AuthResponse
)
async def register(
    request: RegisterRequest, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    User Registration

    Creates the account and signs the user in with a 24 hour session.

    Raises:
        - 409 Conflict: Email already registered
        - 422 Unprocessable Entity: Invalid input (handled by FastAPI)
        - 500 Internal Server Error: Server error
    """
    command = RegisterCommand(
        email=request.email,
        password=request.password,
        first_name=request.first_name,
        last_name=request.last_name,
    )

    result = await RegisterUseCase(uow).execute(command)

    if result.is_err():
        error = result.error
        if error.code == "EMAIL_TAKEN":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.value


class LoginRequest(BaseModel):
    """Login HTTP request payload"""

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=1, description="User password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=AuthResponse)
async def login(request: LoginRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    User Login

    Raises:
        - 401 Unauthorized: Invalid credentials (unknown email or wrong password)
        - 403 Forbidden: Account deactivated
        - 500 Internal Server Error: Server error
    """
    result = await LoginUseCase(uow).execute(request.email, request.password)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_CREDENTIALS":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        elif error.code == "ACCOUNT_DEACTIVATED":
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        raise ServerError(error)

    return result.value


class TokenRequest(BaseModel):
    """Payload carrying a session token"""

    token: str = Field(..., description="Session token")


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=SuccessResponse)
async def logout(request: TokenRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    User Logout

    Deletes the session. Always returns success, also for unknown tokens.
    """
    result = await LogoutUseCase(uow).execute(request.token)

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.post(
    "/validate-session", status_code=status.HTTP_200_OK, response_model=PublicUser
)
async def validate_session(
    request: TokenRequest, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Validate Session

    Used by the client for route protection; the token is the credential.

    Raises:
        - 401 Unauthorized: Unknown or expired token
        - 403 Forbidden: Account inactive
    """
    result = await AuthenticateSessionUseCase(uow).execute(request.token)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_SESSION":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        elif error.code == "ACCOUNT_INACTIVE":
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        raise ServerError(error)

    return result.value
