"""
Webhook Entity

Owner-configured endpoint notified about activity events.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, SQLModel


class Webhook(SQLModel, table=True):
    """
    Webhook entity.

    Business Rules:
    - Scoped to an account, covers every application it owns
    - Empty events list subscribes to all events
    - secret (optional) signs payloads with HMAC-SHA256
    """

    __tablename__ = "webhooks"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    account_id: UUID = Field(foreign_key="accounts.id", nullable=False, index=True)

    url: str = Field(max_length=2048)
    secret: Optional[str] = Field(default=None, max_length=255)
    events: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    is_active: bool = Field(default=True)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    def subscribes_to(self, event: str) -> bool:
        return not self.events or event in self.events
