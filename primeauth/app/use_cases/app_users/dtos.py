"""
App User Use Case DTOs
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class CreateAppUserCommand(BaseModel):
    """Console-side creation; no license slot is taken"""

    username: str
    password: str
    email: Optional[str] = None
    expires_at: Optional[datetime] = None


class AppUserInfo(BaseModel):
    """App user as shown in the console (never includes the password hash)"""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    application_id: UUID
    license_key_id: Optional[UUID] = None
    username: str
    email: Optional[str] = None
    is_active: bool
    is_paused: bool
    hwid: Optional[str] = None
    last_login_ip: Optional[str] = None
    expires_at: Optional[datetime] = None
    login_attempts: int
    last_login_attempt_at: Optional[datetime] = None
    last_login_at: Optional[datetime] = None
    created_at: datetime
