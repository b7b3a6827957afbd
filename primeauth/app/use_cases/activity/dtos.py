"""
Activity Use Case DTOs
"""

from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class ActivityLogInfo(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    application_id: Optional[UUID] = None
    app_user_id: Optional[UUID] = None
    event: str
    ip_address: Optional[str] = None
    hwid: Optional[str] = None
    user_agent: Optional[str] = None
    event_metadata: Optional[Dict[str, Any]] = None
    success: bool
    error_message: Optional[str] = None
    created_at: datetime


class ActivityPage(BaseModel):
    logs: List[ActivityLogInfo]
    next_cursor: Optional[str] = None
