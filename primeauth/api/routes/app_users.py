from datetime import datetime
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from primeauth.api.utils.errors import raise_console_error
from primeauth.app.services.unit_of_work import UnitOfWork
from primeauth.app.use_cases.activity import ActivityLogInfo, GetAppUserActivityUseCase
from primeauth.app.use_cases.app_users import (
    AppUserInfo,
    CreateAppUserCommand,
    CreateAppUserUseCase,
    DeleteAppUserUseCase,
    ListAppUsersUseCase,
    ManageAppUserUseCase,
)
from primeauth.depends import get_current_account, get_unit_of_work

router = APIRouter(prefix="/applications/{application_id}/users", tags=["App Users"])


class CreateAppUserRequest(BaseModel):
    username: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1, max_length=255)
    email: Optional[str] = Field(None, max_length=255)
    expires_at: Optional[datetime] = None


class DeleteAppUserResponse(BaseModel):
    app_user_id: str
    deleted: bool


@router.post("", status_code=status.HTTP_201_CREATED, response_model=AppUserInfo)
async def create_app_user(
    application_id: UUID,
    request: CreateAppUserRequest,
    account_id: UUID = Depends(get_current_account),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create App User

    Owner-side creation without a license key.

    Raises:
        - 404 Not Found: APPLICATION_NOT_FOUND
        - 409 Conflict: DUPLICATE_USER
    """
    expires_at = request.expires_at
    if expires_at is not None and expires_at.tzinfo is not None:
        # Stored timestamps are naive UTC
        expires_at = datetime.utcfromtimestamp(expires_at.timestamp())
    command = CreateAppUserCommand(
        username=request.username,
        password=request.password,
        email=request.email or None,
        expires_at=expires_at,
    )
    result = await CreateAppUserUseCase(uow).execute(account_id, application_id, command)

    if result.is_err():
        raise_console_error(result.error)

    return result.value


@router.get("", status_code=status.HTTP_200_OK, response_model=List[AppUserInfo])
async def list_app_users(
    application_id: UUID,
    account_id: UUID = Depends(get_current_account),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListAppUsersUseCase(uow).execute(account_id, application_id)

    if result.is_err():
        raise_console_error(result.error)

    return result.value


@router.post("/{app_user_id}/pause", status_code=status.HTTP_200_OK, response_model=AppUserInfo)
async def pause_app_user(
    application_id: UUID,
    app_user_id: UUID,
    account_id: UUID = Depends(get_current_account),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Pause App User

    Raises:
        - 404 Not Found: APPLICATION_NOT_FOUND, USER_NOT_FOUND
    """
    result = await ManageAppUserUseCase(uow).pause(account_id, application_id, app_user_id)

    if result.is_err():
        raise_console_error(result.error)

    return result.value


@router.post("/{app_user_id}/unpause", status_code=status.HTTP_200_OK, response_model=AppUserInfo)
async def unpause_app_user(
    application_id: UUID,
    app_user_id: UUID,
    account_id: UUID = Depends(get_current_account),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ManageAppUserUseCase(uow).unpause(account_id, application_id, app_user_id)

    if result.is_err():
        raise_console_error(result.error)

    return result.value


@router.post("/{app_user_id}/reset-hwid", status_code=status.HTTP_200_OK, response_model=AppUserInfo)
async def reset_app_user_hwid(
    application_id: UUID,
    app_user_id: UUID,
    account_id: UUID = Depends(get_current_account),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Reset HWID

    The next successful login binds the device it comes from.
    """
    result = await ManageAppUserUseCase(uow).reset_hwid(account_id, application_id, app_user_id)

    if result.is_err():
        raise_console_error(result.error)

    return result.value


@router.delete("/{app_user_id}", status_code=status.HTTP_200_OK, response_model=DeleteAppUserResponse)
async def delete_app_user(
    application_id: UUID,
    app_user_id: UUID,
    account_id: UUID = Depends(get_current_account),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete App User

    Removes the user's sessions and activity logs and frees its license slot.

    Raises:
        - 404 Not Found: APPLICATION_NOT_FOUND, USER_NOT_FOUND
    """
    result = await DeleteAppUserUseCase(uow).execute(account_id, application_id, app_user_id)

    if result.is_err():
        raise_console_error(result.error)

    return result.value


@router.get(
    "/{app_user_id}/activity", status_code=status.HTTP_200_OK, response_model=List[ActivityLogInfo]
)
async def get_app_user_activity(
    application_id: UUID,
    app_user_id: UUID,
    account_id: UUID = Depends(get_current_account),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Most recent activity of one app user"""
    result = await GetAppUserActivityUseCase(uow).execute(account_id, application_id, app_user_id)

    if result.is_err():
        raise_console_error(result.error)

    return result.value
