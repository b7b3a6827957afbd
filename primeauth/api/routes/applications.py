from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from primeauth.api.utils.errors import raise_console_error
from primeauth.app.services.unit_of_work import UnitOfWork
from primeauth.app.use_cases.applications import (
    ApplicationInfo,
    ApplicationStats,
    CreateApplicationCommand,
    CreateApplicationUseCase,
    GetApplicationStatsUseCase,
    GetApplicationUseCase,
    ListApplicationsUseCase,
    RotateApiKeyUseCase,
    UpdateApplicationCommand,
    UpdateApplicationUseCase,
)
from primeauth.depends import get_current_account, get_unit_of_work

router = APIRouter(prefix="/applications", tags=["Applications"])


class CreateApplicationRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=1000)
    version: str = Field("1.0.0", min_length=1, max_length=50)
    hwid_lock_enabled: bool = False


class UpdateApplicationRequest(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=1000)
    version: Optional[str] = Field(None, min_length=1, max_length=50)
    is_active: Optional[bool] = None
    hwid_lock_enabled: Optional[bool] = None
    login_success_message: Optional[str] = Field(None, max_length=500)
    login_failed_message: Optional[str] = Field(None, max_length=500)
    account_disabled_message: Optional[str] = Field(None, max_length=500)
    account_expired_message: Optional[str] = Field(None, max_length=500)
    version_mismatch_message: Optional[str] = Field(None, max_length=500)
    hwid_mismatch_message: Optional[str] = Field(None, max_length=500)
    account_paused_message: Optional[str] = Field(None, max_length=500)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ApplicationInfo)
async def create_application(
    request: CreateApplicationRequest,
    account_id: UUID = Depends(get_current_account),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Application

    Generates a new API key for the application.

    Raises:
        - 401 Unauthorized: Missing/invalid console token
        - 403 Forbidden: Account deactivated
    """
    command = CreateApplicationCommand(**request.model_dump())
    result = await CreateApplicationUseCase(uow).execute(account_id, command)

    if result.is_err():
        raise_console_error(result.error)

    return result.value


@router.get("", status_code=status.HTTP_200_OK, response_model=List[ApplicationInfo])
async def list_applications(
    account_id: UUID = Depends(get_current_account),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """List the caller's applications, newest first"""
    result = await ListApplicationsUseCase(uow).execute(account_id)

    if result.is_err():
        raise_console_error(result.error)

    return result.value


@router.get("/{application_id}", status_code=status.HTTP_200_OK, response_model=ApplicationInfo)
async def get_application(
    application_id: UUID,
    account_id: UUID = Depends(get_current_account),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get Application

    Raises:
        - 404 Not Found: APPLICATION_NOT_FOUND (also when not accessible)
    """
    result = await GetApplicationUseCase(uow).execute(account_id, application_id)

    if result.is_err():
        raise_console_error(result.error)

    return result.value


@router.patch("/{application_id}", status_code=status.HTTP_200_OK, response_model=ApplicationInfo)
async def update_application(
    application_id: UUID,
    request: UpdateApplicationRequest,
    account_id: UUID = Depends(get_current_account),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Application

    Partial update of settings and tenant messages.

    Raises:
        - 400 Bad Request: INVALID_MESSAGE (blank message)
        - 404 Not Found: APPLICATION_NOT_FOUND
    """
    command = UpdateApplicationCommand(**request.model_dump(exclude_unset=True))
    result = await UpdateApplicationUseCase(uow).execute(account_id, application_id, command)

    if result.is_err():
        raise_console_error(result.error)

    return result.value


@router.post(
    "/{application_id}/rotate-key", status_code=status.HTTP_200_OK, response_model=ApplicationInfo
)
async def rotate_api_key(
    application_id: UUID,
    account_id: UUID = Depends(get_current_account),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Rotate API Key

    The previous key stops working immediately.

    Raises:
        - 404 Not Found: APPLICATION_NOT_FOUND
    """
    result = await RotateApiKeyUseCase(uow).execute(account_id, application_id)

    if result.is_err():
        raise_console_error(result.error)

    return result.value


@router.get("/{application_id}/stats", status_code=status.HTTP_200_OK, response_model=ApplicationStats)
async def get_application_stats(
    application_id: UUID,
    account_id: UUID = Depends(get_current_account),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """User, session, license and login counters for one application"""
    result = await GetApplicationStatsUseCase(uow).execute(account_id, application_id)

    if result.is_err():
        raise_console_error(result.error)

    return result.value
