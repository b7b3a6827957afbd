"""
Admin API Routes - System Administration Endpoints

Used by the external sign-in flow and operators.
Authentication is via Admin API Key, not console session tokens.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, EmailStr, Field

from config import ApplicationConfig
from primeauth.api.error import ClientError
from primeauth.api.utils.admin_auth import verify_admin_api_key
from primeauth.api.utils.errors import raise_console_error
from primeauth.app.services.unit_of_work import UnitOfWork
from primeauth.app.use_cases.accounts import (
    AccountInfo,
    SignInAccountUseCase,
    SignInResponse,
    UpdateAccountCommand,
    UpdateAccountUseCase,
)
from primeauth.app.use_cases.sessions import SweepSessionsUseCase
from primeauth.depends import get_unit_of_work

router = APIRouter(prefix="/admin", tags=["Admin"], dependencies=[Depends(verify_admin_api_key)])


class SignInRequest(BaseModel):
    email: EmailStr = Field(..., description="Email verified by the sign-in provider")


class UpdateAccountRequest(UpdateAccountCommand):
    pass


class SweepSessionsResponse(BaseModel):
    deactivated: int


@router.post("/accounts/sign-in", status_code=status.HTTP_200_OK, response_model=SignInResponse)
async def sign_in_account(
    request: SignInRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Sign In Account

    Provisions the account on first sign-in and returns a console session
    token, also set as the console cookie.

    Requires: X-Admin-API-Key header

    Raises:
        - 401 Unauthorized: Missing or invalid admin API key
        - 403 Forbidden: ACCOUNT_DISABLED
    """
    result = await SignInAccountUseCase(uow).execute(request.email)

    if result.is_err():
        raise_console_error(result.error)

    response = JSONResponse(content=result.value.model_dump(mode="json"))
    response.set_cookie(
        ApplicationConfig.CONSOLE_COOKIE_NAME,
        result.value.access_token,
        max_age=ApplicationConfig.CONSOLE_TOKEN_TTL_MINUTES * 60,
        httponly=True,
        samesite="lax",
    )
    return response


@router.patch("/accounts/{account_id}", status_code=status.HTTP_200_OK, response_model=AccountInfo)
async def update_account(
    account_id: UUID,
    request: UpdateAccountRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Account

    Role, permissions and soft deactivation (is_active=false).

    Requires: X-Admin-API-Key header

    Raises:
        - 400 Bad Request: INVALID_PERMISSION
        - 401 Unauthorized: Missing or invalid admin API key
        - 404 Not Found: ACCOUNT_NOT_FOUND
    """
    command = UpdateAccountCommand(**request.model_dump(exclude_unset=True))
    result = await UpdateAccountUseCase(uow).execute(account_id, command)

    if result.is_err():
        if result.error.code == "ACCOUNT_NOT_FOUND":
            raise ClientError(result.error, status_code=status.HTTP_404_NOT_FOUND)
        raise_console_error(result.error)

    return result.value


@router.post("/sessions/sweep", status_code=status.HTTP_200_OK, response_model=SweepSessionsResponse)
async def sweep_sessions(uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Sweep Sessions

    Deactivates every expired app-user session now.

    Requires: X-Admin-API-Key header
    """
    result = await SweepSessionsUseCase(uow).execute()
    return SweepSessionsResponse(deactivated=result.value)
