from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field, field_validator

from session_auth.api.error import ClientError, ServerError
from session_auth.app.services.unit_of_work import UnitOfWork
from session_auth.app.use_cases.auth import PublicUser, SuccessResponse
from session_auth.app.use_cases.users import (
    ChangePasswordUseCase,
    UpdateProfileCommand,
    UpdateProfileUseCase,
)
from session_auth.depends import get_current_user, get_unit_of_work
from session_auth.libs.result import Error

router = APIRouter(prefix="/users", tags=["User"])


@router.get("/me", status_code=status.HTTP_200_OK, response_model=PublicUser)
async def get_me(current_user: PublicUser = Depends(get_current_user)):
    """
    Get Current User

    Returns the profile behind the bearer token.

    Raises:
        - 401 Unauthorized: Missing, unknown or expired token
        - 403 Forbidden: Account inactive
    """
    return current_user


class UpdateProfileRequest(BaseModel):
    """
    Update profile HTTP request payload

    Omitted fields are left unchanged. Fields that are sent must carry a
    value; null is rejected.
    """

    id: UUID = Field(..., description="User ID, must be the caller's own")
    email: Optional[EmailStr] = None
    first_name: Optional[str] = Field(default=None, min_length=1, max_length=50)
    last_name: Optional[str] = Field(default=None, min_length=1, max_length=50)

    @field_validator("email", "first_name", "last_name")
    @classmethod
    def not_null(cls, value):
        if value is None:
            raise ValueError("may be omitted but not null")
        return value


@router.patch("/profile", status_code=status.HTTP_200_OK, response_model=PublicUser)
async def update_profile(
    request: UpdateProfileRequest,
    current_user: PublicUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Profile

    Authorization:
    - Users can only update their own profile

    Raises:
        - 403 Forbidden: id is not the caller's
        - 404 Not Found: User not found
        - 409 Conflict: Email already taken
        - 500 Internal Server Error: Server error
    """
    if request.id != current_user.id:
        raise ClientError(
            Error("FORBIDDEN", "Cannot update another user's profile"),
            status_code=status.HTTP_403_FORBIDDEN,
        )

    command = UpdateProfileCommand(
        **request.model_dump(exclude_unset=True, exclude={"id"})
    )

    result = await UpdateProfileUseCase(uow).execute(current_user.id, command)

    if result.is_err():
        error = result.error
        if error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code == "EMAIL_TAKEN":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.value


class ChangePasswordRequest(BaseModel):
    """Change password HTTP request payload"""

    current_password: str = Field(..., min_length=1)
    new_password: str = Field(
        ..., min_length=8, max_length=100, description="New password (8-100 chars)"
    )


@router.post(
    "/change-password", status_code=status.HTTP_200_OK, response_model=SuccessResponse
)
async def change_password(
    request: ChangePasswordRequest,
    current_user: PublicUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Change Password

    Revokes every session of the user, including the one used for this call.

    Raises:
        - 400 Bad Request: Current password is incorrect
        - 404 Not Found: User not found
        - 500 Internal Server Error: Server error
    """
    result = await ChangePasswordUseCase(uow).execute(
        current_user.id, request.current_password, request.new_password
    )

    if result.is_err():
        error = result.error
        if error.code == "INCORRECT_PASSWORD":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
