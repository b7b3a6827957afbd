"""
Session Use Case DTOs
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class ActiveSessionInfo(BaseModel):
    """Session as shown in the console; the token itself is never returned"""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    application_id: UUID
    app_user_id: UUID
    ip_address: Optional[str] = None
    hwid: Optional[str] = None
    user_agent: Optional[str] = None
    location: Optional[str] = None
    is_active: bool
    last_activity_at: datetime
    created_at: datetime
    expires_at: Optional[datetime] = None
