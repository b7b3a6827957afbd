from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from primeauth.api.utils.errors import raise_console_error
from primeauth.app.services.unit_of_work import UnitOfWork
from primeauth.app.use_cases.activity import ActivityPage, GetApplicationActivityUseCase
from primeauth.depends import get_current_account, get_unit_of_work

router = APIRouter(prefix="/applications/{application_id}/activity", tags=["Activity"])


@router.get("", status_code=status.HTTP_200_OK, response_model=ActivityPage)
async def get_application_activity(
    application_id: UUID,
    limit: int = Query(50, ge=1, le=100, description="Number of logs to return"),
    cursor: Optional[str] = Query(None, description="Pagination cursor from previous response"),
    account_id: UUID = Depends(get_current_account),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get Application Activity

    Newest first; pass next_cursor back to get the following page.

    Raises:
        - 404 Not Found: APPLICATION_NOT_FOUND
    """
    result = await GetApplicationActivityUseCase(uow).execute(
        account_id, application_id, limit=limit, cursor=cursor
    )

    if result.is_err():
        raise_console_error(result.error)

    return result.value
