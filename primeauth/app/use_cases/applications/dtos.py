"""
Application Use Case DTOs
"""

from datetime import datetime
from typing import Dict, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class CreateApplicationCommand(BaseModel):
    name: str
    description: Optional[str] = None
    version: str = "1.0.0"
    hwid_lock_enabled: bool = False


class UpdateApplicationCommand(BaseModel):
    """Only fields that are set are applied"""

    name: Optional[str] = None
    description: Optional[str] = None
    version: Optional[str] = None
    is_active: Optional[bool] = None
    hwid_lock_enabled: Optional[bool] = None
    login_success_message: Optional[str] = None
    login_failed_message: Optional[str] = None
    account_disabled_message: Optional[str] = None
    account_expired_message: Optional[str] = None
    version_mismatch_message: Optional[str] = None
    hwid_mismatch_message: Optional[str] = None
    account_paused_message: Optional[str] = None


class ApplicationInfo(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    account_id: UUID
    name: str
    description: Optional[str] = None
    api_key: str
    version: str
    is_active: bool
    hwid_lock_enabled: bool
    login_success_message: str
    login_failed_message: str
    account_disabled_message: str
    account_expired_message: str
    version_mismatch_message: str
    hwid_mismatch_message: str
    account_paused_message: str
    created_at: datetime
    updated_at: datetime


class ApplicationStats(BaseModel):
    """Dashboard counters for one application"""

    application_id: UUID
    total_users: int
    active_users: int
    paused_users: int
    active_sessions: int
    total_licenses: int
    active_licenses: int
    license_capacity: int
    license_usage: int
    login_successes: int
    login_failures: int
    events: Dict[str, int]
