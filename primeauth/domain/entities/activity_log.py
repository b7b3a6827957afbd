"""
ActivityLog Entity

Immutable log of every authentication-relevant event.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel


class ActivityLog(SQLModel, table=True):
    """
    ActivityLog entity - append-only event record.

    Business Rules:
    - Never updated by normal flows
    - Deleted only with the app user it belongs to
    - event_metadata is an opaque JSON document, already redacted
    """

    __tablename__ = "activity_logs"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    application_id: Optional[UUID] = Field(default=None, index=True)
    app_user_id: Optional[UUID] = Field(default=None, index=True)

    event: str = Field(max_length=100)  # e.g. "user_login", "login_failed"
    ip_address: Optional[str] = Field(default=None, max_length=64)
    hwid: Optional[str] = Field(default=None, max_length=255)
    user_agent: Optional[str] = Field(default=None, max_length=500)
    event_metadata: Optional[dict] = Field(default=None, sa_column=Column(JSON))
    success: bool = Field(default=True)
    error_message: Optional[str] = Field(default=None, max_length=500)

    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (
        Index("idx_activity_app_created", "application_id", "created_at"),
        Index("idx_activity_user_created", "app_user_id", "created_at"),
    )
