from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from primeauth.api.utils.errors import raise_console_error
from primeauth.app.services.unit_of_work import UnitOfWork
from primeauth.app.use_cases.sessions import (
    ActiveSessionInfo,
    EndSessionUseCase,
    ListActiveSessionsUseCase,
)
from primeauth.depends import get_current_account, get_unit_of_work

router = APIRouter(prefix="/applications/{application_id}/sessions", tags=["Sessions"])


class EndSessionResponse(BaseModel):
    session_id: str
    ended: bool


@router.get("", status_code=status.HTTP_200_OK, response_model=List[ActiveSessionInfo])
async def list_active_sessions(
    application_id: UUID,
    account_id: UUID = Depends(get_current_account),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Active sessions of one application, most recently used first"""
    result = await ListActiveSessionsUseCase(uow).execute(account_id, application_id)

    if result.is_err():
        raise_console_error(result.error)

    return result.value


@router.delete("/{session_id}", status_code=status.HTTP_200_OK, response_model=EndSessionResponse)
async def end_session(
    application_id: UUID,
    session_id: UUID,
    account_id: UUID = Depends(get_current_account),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    End Session

    Raises:
        - 404 Not Found: APPLICATION_NOT_FOUND, SESSION_NOT_FOUND
    """
    result = await EndSessionUseCase(uow).execute(account_id, application_id, session_id)

    if result.is_err():
        raise_console_error(result.error)

    return result.value
