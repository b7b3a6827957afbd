"""
ActiveSession Entity

A live authenticated app-user session identified by an opaque bearer token.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel


class ActiveSession(SQLModel, table=True):
    """
    ActiveSession entity.

    Business Rules:
    - session_token is random (secrets.token_urlsafe) and never reused
    - Created on successful login, refreshed on verify
    - Ended on logout or by the expiry sweep (is_active=False)
    """

    __tablename__ = "active_sessions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    application_id: UUID = Field(foreign_key="applications.id", nullable=False)
    app_user_id: UUID = Field(foreign_key="app_users.id", nullable=False)

    session_token: str = Field(unique=True, index=True, max_length=128)
    ip_address: Optional[str] = Field(default=None, max_length=64)
    hwid: Optional[str] = Field(default=None, max_length=255)
    user_agent: Optional[str] = Field(default=None, max_length=500)
    location: Optional[str] = Field(default=None, max_length=255)
    is_active: bool = Field(default=True)

    # Timestamps
    last_activity_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    expires_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_session_app_active", "application_id", "is_active"),
        Index("idx_session_user_active", "app_user_id", "is_active"),
        Index("idx_session_expires_at", "expires_at"),
    )

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        return self.expires_at is not None and self.expires_at <= (now or datetime.utcnow())
