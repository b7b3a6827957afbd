from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from primeauth.api.utils.errors import raise_console_error
from primeauth.app.services.unit_of_work import UnitOfWork
from primeauth.app.use_cases.blacklist import (
    AddBlacklistEntryCommand,
    AddBlacklistEntryUseCase,
    BlacklistEntryInfo,
    ListBlacklistEntriesUseCase,
    RemoveBlacklistEntryUseCase,
)
from primeauth.depends import get_current_account, get_unit_of_work
from primeauth.domain.entities import BlacklistType

router = APIRouter(prefix="/blacklist", tags=["Blacklist"])


class AddBlacklistEntryRequest(BaseModel):
    type: BlacklistType
    value: str = Field(..., min_length=1, max_length=255)
    application_id: Optional[UUID] = Field(None, description="Omit for a global rule")
    reason: Optional[str] = Field(None, max_length=500)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=BlacklistEntryInfo)
async def add_blacklist_entry(
    request: AddBlacklistEntryRequest,
    account_id: UUID = Depends(get_current_account),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Add Blacklist Entry

    Raises:
        - 403 Forbidden: Global rule without manage_users permission
        - 404 Not Found: APPLICATION_NOT_FOUND
        - 409 Conflict: BLACKLIST_ENTRY_EXISTS
        - 422 Unprocessable Entity: Unknown type (handled by FastAPI)
    """
    command = AddBlacklistEntryCommand(**request.model_dump())
    result = await AddBlacklistEntryUseCase(uow).execute(account_id, command)

    if result.is_err():
        raise_console_error(result.error)

    return result.value


@router.get("", status_code=status.HTTP_200_OK, response_model=List[BlacklistEntryInfo])
async def list_blacklist_entries(
    application_id: Optional[UUID] = Query(None),
    account_id: UUID = Depends(get_current_account),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Active rules for one application (or all owned ones) plus global rules"""
    result = await ListBlacklistEntriesUseCase(uow).execute(account_id, application_id)

    if result.is_err():
        raise_console_error(result.error)

    return result.value


@router.delete("/{entry_id}", status_code=status.HTTP_200_OK, response_model=BlacklistEntryInfo)
async def remove_blacklist_entry(
    entry_id: UUID,
    account_id: UUID = Depends(get_current_account),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Remove Blacklist Entry (deactivate)

    Raises:
        - 403 Forbidden: Global rule without manage_users permission
        - 404 Not Found: BLACKLIST_ENTRY_NOT_FOUND
    """
    result = await RemoveBlacklistEntryUseCase(uow).execute(account_id, entry_id)

    if result.is_err():
        raise_console_error(result.error)

    return result.value
