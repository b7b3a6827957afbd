from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from primeauth.api.utils.errors import raise_console_error
from primeauth.app.services.unit_of_work import UnitOfWork
from primeauth.app.use_cases.licenses import (
    MAX_BULK_LICENSES,
    CreateLicenseKeysCommand,
    CreateLicenseKeysUseCase,
    DeactivateLicenseKeyUseCase,
    LicenseKeyInfo,
    ListLicenseKeysUseCase,
)
from primeauth.depends import get_current_account, get_unit_of_work

router = APIRouter(prefix="/applications/{application_id}/licenses", tags=["License Keys"])


class CreateLicenseKeysRequest(BaseModel):
    license_key: Optional[str] = Field(None, min_length=1, max_length=255)
    max_users: int = Field(1, ge=1)
    validity_days: int = Field(..., ge=1)
    description: Optional[str] = Field(None, max_length=1000)
    count: int = Field(1, ge=1, le=MAX_BULK_LICENSES)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=List[LicenseKeyInfo])
async def create_license_keys(
    application_id: UUID,
    request: CreateLicenseKeysRequest,
    account_id: UUID = Depends(get_current_account),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create License Keys

    One explicit key, or `count` generated XXXXX-XXXXX-XXXXX-XXXXX keys.

    Raises:
        - 400 Bad Request: INVALID_REQUEST (explicit key with count > 1)
        - 404 Not Found: APPLICATION_NOT_FOUND
        - 409 Conflict: LICENSE_KEY_EXISTS
    """
    command = CreateLicenseKeysCommand(**request.model_dump())
    result = await CreateLicenseKeysUseCase(uow).execute(account_id, application_id, command)

    if result.is_err():
        raise_console_error(result.error)

    return result.value


@router.get("", status_code=status.HTTP_200_OK, response_model=List[LicenseKeyInfo])
async def list_license_keys(
    application_id: UUID,
    account_id: UUID = Depends(get_current_account),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListLicenseKeysUseCase(uow).execute(account_id, application_id)

    if result.is_err():
        raise_console_error(result.error)

    return result.value


@router.delete("/{license_key_id}", status_code=status.HTTP_200_OK, response_model=LicenseKeyInfo)
async def deactivate_license_key(
    application_id: UUID,
    license_key_id: UUID,
    account_id: UUID = Depends(get_current_account),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Deactivate License Key

    Raises:
        - 404 Not Found: APPLICATION_NOT_FOUND, LICENSE_NOT_FOUND
    """
    result = await DeactivateLicenseKeyUseCase(uow).execute(account_id, application_id, license_key_id)

    if result.is_err():
        raise_console_error(result.error)

    return result.value
