"""
Blacklist Use Case DTOs
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from primeauth.domain.entities import BlacklistType


class AddBlacklistEntryCommand(BaseModel):
    """application_id None creates a global rule"""

    type: BlacklistType
    value: str
    application_id: Optional[UUID] = None
    reason: Optional[str] = None


class BlacklistEntryInfo(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    application_id: Optional[UUID] = None
    type: BlacklistType
    value: str
    reason: Optional[str] = None
    is_active: bool
    created_by: Optional[UUID] = None
    created_at: datetime
