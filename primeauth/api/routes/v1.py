"""
End-User API Routes (/api/v1)

Consumed by third-party desktop clients. Authenticated with the
application's X-API-Key header. Every response body is
{"success": bool, "message": str, ...}; error codes never leave the server.
"""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Header, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from primeauth.api.utils.errors import raise_auth_flow_error
from primeauth.app.services.unit_of_work import UnitOfWork
from primeauth.app.services.webhook_notifier import WebhookNotifier
from primeauth.app.use_cases.auth import (
    ClientInfo,
    LoginCommand,
    LoginUseCase,
    LogoutUseCase,
    RegisterCommand,
    RegisterUseCase,
    VerifySessionUseCase,
)
from primeauth.depends import get_api_key, get_client_info, get_unit_of_work, get_webhook_notifier

router = APIRouter(tags=["End-User API"])


class RegisterRequest(BaseModel):
    username: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1, max_length=255)
    license_key: str = Field(..., min_length=1, max_length=255)
    email: Optional[str] = Field(None, max_length=255)
    hwid: Optional[str] = Field(None, max_length=255)


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1, max_length=255)
    version: Optional[str] = Field(None, max_length=50)
    hwid: Optional[str] = Field(None, max_length=255)


class SessionTokenRequest(BaseModel):
    session_token: str = Field(..., min_length=1, max_length=128)


class LogoutRequest(BaseModel):
    session_token: Optional[str] = None


class RegisterHttpResponse(BaseModel):
    success: bool = True
    message: str
    user_id: str
    username: str
    email: Optional[str] = None
    expires_at: Optional[datetime] = None


class LoginHttpResponse(BaseModel):
    success: bool = True
    message: str
    user_id: str
    session_token: str
    username: str
    email: Optional[str] = None
    expires_at: Optional[datetime] = None
    hwid_locked: bool


class VerifyHttpResponse(BaseModel):
    success: bool = True
    message: str
    user_id: str


class LogoutHttpResponse(BaseModel):
    success: bool = True
    message: str


@router.post(
    "/register", status_code=status.HTTP_201_CREATED, response_model=RegisterHttpResponse
)
async def register(
    request: RegisterRequest,
    api_key: str = Depends(get_api_key),
    client: ClientInfo = Depends(get_client_info),
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: WebhookNotifier = Depends(get_webhook_notifier),
):
    """
    Register an app user under a license key.

    Raises:
        - 400 Bad Request: invalid/expired/full license, duplicate user
        - 401 Unauthorized: missing or invalid API key
        - 403 Forbidden: blacklisted
        - 503 Service Unavailable: store timeout or outage
    """
    command = RegisterCommand(
        api_key=api_key,
        username=request.username,
        password=request.password,
        license_key=request.license_key,
        email=request.email or None,
        hwid=request.hwid or None,
    )
    result = await RegisterUseCase(uow, notifier).execute(command, client)

    if result.is_err():
        raise_auth_flow_error(result.error)

    return RegisterHttpResponse(**result.value.model_dump())


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginHttpResponse)
async def login(
    request: LoginRequest,
    api_key: str = Depends(get_api_key),
    client: ClientInfo = Depends(get_client_info),
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: WebhookNotifier = Depends(get_webhook_notifier),
):
    """
    Authenticate an app user and open a session.

    Raises:
        - 400 Bad Request: version mismatch, HWID required
        - 401 Unauthorized: invalid API key or credentials, account
          disabled/paused/expired, HWID mismatch
        - 403 Forbidden: blacklisted
        - 503 Service Unavailable: store timeout or outage
    """
    command = LoginCommand(
        api_key=api_key,
        username=request.username,
        password=request.password,
        version=request.version or None,
        hwid=request.hwid or None,
    )
    result = await LoginUseCase(uow, notifier).execute(command, client)

    if result.is_err():
        raise_auth_flow_error(result.error)

    return LoginHttpResponse(**result.value.model_dump())


@router.post("/verify", status_code=status.HTTP_200_OK, response_model=VerifyHttpResponse)
async def verify(
    request: SessionTokenRequest,
    api_key: str = Depends(get_api_key),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Check a session token and refresh its activity timestamp.

    Raises:
        - 401 Unauthorized: invalid API key, invalid or expired session
        - 503 Service Unavailable: store timeout or outage
    """
    result = await VerifySessionUseCase(uow).execute(api_key, request.session_token)

    if result.is_err():
        raise_auth_flow_error(result.error)

    return VerifyHttpResponse(**result.value.model_dump())


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=LogoutHttpResponse)
async def logout(
    request: Optional[LogoutRequest] = None,
    x_api_key: Optional[str] = Header(None),
    client: ClientInfo = Depends(get_client_info),
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: WebhookNotifier = Depends(get_webhook_notifier),
):
    """
    End a session.

    Succeeds for missing or unknown keys and tokens, and for sessions that
    already ended.

    Raises:
        - 503 Service Unavailable: store timeout or outage
    """
    session_token = request.session_token if request is not None else None
    result = await LogoutUseCase(uow, notifier).execute(x_api_key, session_token, client)

    if result.is_err():
        raise_auth_flow_error(result.error)

    return LogoutHttpResponse(**result.value.model_dump())


def invalid_request_response() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"success": False, "message": "Invalid request data"},
    )
