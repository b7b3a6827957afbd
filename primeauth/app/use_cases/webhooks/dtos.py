"""
Webhook Use Case DTOs
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel


class CreateWebhookCommand(BaseModel):
    url: str
    secret: Optional[str] = None
    events: List[str] = []


class WebhookInfo(BaseModel):
    """Webhook as shown in the console; the secret is reported, not returned"""

    id: UUID
    account_id: UUID
    url: str
    events: List[str]
    is_active: bool
    has_secret: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, webhook) -> "WebhookInfo":
        return cls(
            id=webhook.id,
            account_id=webhook.account_id,
            url=webhook.url,
            events=list(webhook.events or []),
            is_active=webhook.is_active,
            has_secret=bool(webhook.secret),
            created_at=webhook.created_at,
            updated_at=webhook.updated_at,
        )
