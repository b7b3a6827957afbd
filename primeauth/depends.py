from typing import Optional
from uuid import UUID

from fastapi import Depends, Header, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from libs.result import Error
from primeauth.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from primeauth.adapter.services.webhook_notifier import HttpxWebhookNotifier
from primeauth.api.error import AuthFlowError
from primeauth.api.utils.jwt import verify_jwt
from primeauth.app.services.webhook_notifier import WebhookNotifier
from primeauth.app.use_cases.auth import ClientInfo

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer(auto_error=False)

webhook_notifier = HttpxWebhookNotifier()


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_webhook_notifier() -> WebhookNotifier:
    return webhook_notifier


async def get_api_key(x_api_key: Optional[str] = Header(None)) -> str:
    """
    Application API key from the X-API-Key header.

    Raises:
        AuthFlowError: 401 if the header is missing
    """
    if not x_api_key:
        raise AuthFlowError(
            Error("API_KEY_REQUIRED", "API key required"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )
    return x_api_key


def get_client_info(request: Request) -> ClientInfo:
    """Caller IP and user agent; X-Forwarded-For only when TRUST_PROXY_HEADERS is on"""
    ip_address = request.client.host if request.client else None
    if ApplicationConfig.TRUST_PROXY_HEADERS:
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded:
            ip_address = forwarded.split(",")[0].strip()
    return ClientInfo(ip_address=ip_address, user_agent=request.headers.get("user-agent"))


async def get_current_account(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> UUID:
    """
    Dependency to extract and verify the console session token.

    The token is read from the console cookie first, then from the
    Authorization header.

    Returns:
        Account UUID from the token payload

    Raises:
        HTTPException: 401 if token is missing, invalid or expired
    """
    token = request.cookies.get(ApplicationConfig.CONSOLE_COOKIE_NAME)
    if not token and credentials is not None:
        token = credentials.credentials

    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    payload = verify_jwt(token)
    if payload is None or "account_id" not in payload:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )

    try:
        return UUID(payload["account_id"])
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )
