"""
BlacklistEntry Entity

Block rule for an identity attribute, per application or global.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from .enums import BlacklistType


class BlacklistEntry(SQLModel, table=True):
    """
    BlacklistEntry entity.

    Business Rules:
    - application_id NULL means the rule applies to every application
    - At most one active entry per (application_id, type, value)
    - Removal deactivates instead of deleting
    """

    __tablename__ = "blacklist"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    application_id: Optional[UUID] = Field(default=None, foreign_key="applications.id")

    type: BlacklistType
    value: str = Field(max_length=255)
    reason: Optional[str] = Field(default=None, max_length=500)
    is_active: bool = Field(default=True)

    created_by: Optional[UUID] = Field(default=None, foreign_key="accounts.id")
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (
        Index("idx_blacklist_lookup", "type", "value", "is_active"),
        Index("idx_blacklist_application", "application_id"),
    )
