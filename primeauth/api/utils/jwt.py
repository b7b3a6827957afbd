from datetime import UTC, datetime, timedelta
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt

from config import ApplicationConfig


def generate_console_token(
    account_id: UUID, role: str, expires_delta: Optional[timedelta] = None
) -> str:
    """
    Generate owner console session token

    Args:
        account_id: Account UUID
        role: Account role (owner, admin, moderator, user)
        expires_delta: Token lifetime, CONSOLE_TOKEN_TTL_MINUTES by default

    Returns:
        JWT token string (HS256)
    """
    now = datetime.now(UTC)
    if expires_delta is None:
        expires_delta = timedelta(minutes=ApplicationConfig.CONSOLE_TOKEN_TTL_MINUTES)
    payload = {
        "account_id": str(account_id),
        "role": role,
        "exp": now + expires_delta,
        "iat": now,
    }
    return jwt.encode(payload, ApplicationConfig.JWT_SECRET, algorithm="HS256")


def verify_jwt(token: str) -> Optional[dict]:
    """
    Verify and decode JWT token

    Args:
        token: JWT token string

    Returns:
        Decoded payload dict or None if invalid
    """
    try:
        payload = jwt.decode(
            token, ApplicationConfig.JWT_SECRET, algorithms=["HS256"]
        )
        return payload
    except JWTError:
        return None
