"""
LicenseKey Entity

Registration capacity grant for an application.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel


class LicenseKey(SQLModel, table=True):
    """
    LicenseKey entity - gates how many app users may register under it.

    Business Rules:
    - 0 <= current_users <= max_users
    - validity_days is converted to an absolute expires_at on creation
    - current_users only moves through conditional UPDATEs (see LicenseKeyRepository)
    """

    __tablename__ = "license_keys"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    application_id: UUID = Field(foreign_key="applications.id", nullable=False, index=True)

    license_key: str = Field(unique=True, index=True, max_length=255)
    max_users: int = Field(default=1)
    current_users: int = Field(default=0)
    validity_days: int
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    is_active: bool = Field(default=True)
    description: Optional[str] = Field(default=None, max_length=1000)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        return self.expires_at <= (now or datetime.utcnow())

    def has_capacity(self) -> bool:
        return self.current_users < self.max_users
