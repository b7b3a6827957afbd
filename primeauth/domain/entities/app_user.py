"""
AppUser Entity

End-user credential record scoped to one application.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel, UniqueConstraint


class AppUser(SQLModel, table=True):
    """
    AppUser entity - an end-user of a tenant application.

    Business Rules:
    - username unique within an application
    - email unique within an application when present
    - Password stored as bcrypt hash only
    - hwid taken from registration, else bound on first successful login
      when the application locks HWIDs
    - expires_at inherited from the license key used at registration
    """

    __tablename__ = "app_users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    application_id: UUID = Field(foreign_key="applications.id", nullable=False, index=True)
    license_key_id: Optional[UUID] = Field(default=None, foreign_key="license_keys.id")

    username: str = Field(max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars
    email: Optional[str] = Field(default=None, max_length=255)

    is_active: bool = Field(default=True)
    is_paused: bool = Field(default=False)
    hwid: Optional[str] = Field(default=None, max_length=255)
    last_login_ip: Optional[str] = Field(default=None, max_length=64)
    expires_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    login_attempts: int = Field(default=0)
    last_login_attempt_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime)
    )
    last_login_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (
        UniqueConstraint("application_id", "username", name="uq_app_user_username"),
        UniqueConstraint("application_id", "email", name="uq_app_user_email"),
    )

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        return self.expires_at is not None and self.expires_at < (now or datetime.utcnow())
