"""
Authentication Use Case DTOs (Data Transfer Objects)

Commands and responses for the end-user API flows (register, login,
verify, logout). Decoupled from the HTTP response format.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


# ============================================================================
# Command DTOs
# ============================================================================


class ClientInfo(BaseModel):
    """Caller details captured by the API layer"""

    ip_address: Optional[str] = None
    user_agent: Optional[str] = None


class RegisterCommand(BaseModel):
    api_key: str
    username: str
    password: str
    license_key: str
    email: Optional[str] = None
    hwid: Optional[str] = None


class LoginCommand(BaseModel):
    api_key: str
    username: str
    password: str
    version: Optional[str] = None
    hwid: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class RegisterResponse(BaseModel):
    """Response for register use case"""

    message: str
    user_id: str
    username: str
    email: Optional[str] = None
    expires_at: Optional[datetime] = None


class LoginResponse(BaseModel):
    """Response for login use case"""

    message: str
    user_id: str
    session_token: str
    username: str
    email: Optional[str] = None
    expires_at: Optional[datetime] = None
    hwid_locked: bool


class VerifyResponse(BaseModel):
    """Response for verify session use case"""

    message: str
    user_id: str


class LogoutResponse(BaseModel):
    """Response for logout use case"""

    message: str
