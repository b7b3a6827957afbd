"""
License Key Use Case DTOs
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

MAX_BULK_LICENSES = 100


class CreateLicenseKeysCommand(BaseModel):
    """
    Either an explicit license_key (count must be 1) or generated keys.
    """

    license_key: Optional[str] = None
    max_users: int = Field(default=1, ge=1)
    validity_days: int = Field(ge=1)
    description: Optional[str] = None
    count: int = Field(default=1, ge=1, le=MAX_BULK_LICENSES)


class LicenseKeyInfo(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    application_id: UUID
    license_key: str
    max_users: int
    current_users: int
    validity_days: int
    expires_at: datetime
    is_active: bool
    description: Optional[str] = None
    created_at: datetime
