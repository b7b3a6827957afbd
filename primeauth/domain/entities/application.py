"""
Application Entity

A tenant's integration: an isolated authentication environment with its own API key.
"""

import secrets
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

API_KEY_PREFIX = "pa_"


def generate_api_key() -> str:
    return API_KEY_PREFIX + secrets.token_urlsafe(32)


class Application(SQLModel, table=True):
    """
    Application entity - one tenant integration.

    Business Rules:
    - api_key is globally unique and never edited in place
    - Rotation swaps in a new key in the same transaction (old key stops resolving)
    - Message columns are tenant-customizable user-facing texts
    - Version check is exact string equality
    """

    __tablename__ = "applications"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    account_id: UUID = Field(foreign_key="accounts.id", nullable=False, index=True)

    name: str = Field(max_length=255)
    description: Optional[str] = Field(default=None, max_length=1000)
    api_key: str = Field(default_factory=generate_api_key, unique=True, index=True)
    version: str = Field(default="1.0.0", max_length=50)

    is_active: bool = Field(default=True)
    hwid_lock_enabled: bool = Field(default=False)

    # Tenant-customizable messages
    login_success_message: str = Field(default="Login successful!")
    login_failed_message: str = Field(default="Invalid credentials!")
    account_disabled_message: str = Field(default="Account is disabled!")
    account_expired_message: str = Field(default="Account has expired!")
    version_mismatch_message: str = Field(
        default="Please update your application to the latest version!"
    )
    hwid_mismatch_message: str = Field(default="Hardware ID mismatch detected!")
    account_paused_message: str = Field(
        default="Account is temporarily paused. Contact support."
    )

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (Index("idx_application_account_active", "account_id", "is_active"),)
