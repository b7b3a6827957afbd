from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from primeauth.app.repositories.webhook_repository import IWebhookRepository
from primeauth.domain.entities import Webhook


class WebhookRepository(IWebhookRepository):
    """Webhook repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, webhook_id: UUID) -> Optional[Webhook]:
        """Get webhook by ID"""
        stmt = select(Webhook).where(Webhook.id == webhook_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_by_account_id(self, account_id: UUID) -> List[Webhook]:
        """Get all webhooks of an account"""
        stmt = (
            select(Webhook)
            .where(Webhook.account_id == account_id)
            .order_by(Webhook.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_active_by_account_id(self, account_id: UUID) -> List[Webhook]:
        """Get active webhooks of an account"""
        stmt = select(Webhook).where(
            Webhook.account_id == account_id,
            Webhook.is_active == True,
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, webhook: Webhook) -> Webhook:
        """Create a new webhook"""
        self.session.add(webhook)
        await self.session.flush()
        await self.session.refresh(webhook)
        return webhook

    async def update(self, webhook: Webhook) -> Webhook:
        """Update existing webhook"""
        self.session.add(webhook)
        await self.session.flush()
        await self.session.refresh(webhook)
        return webhook

    async def delete(self, webhook: Webhook) -> None:
        """Delete a webhook"""
        await self.session.delete(webhook)
        await self.session.flush()
