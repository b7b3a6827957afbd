from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from primeauth.domain.entities import Webhook


class IWebhookRepository(ABC):
    """Webhook repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, webhook_id: UUID) -> Optional[Webhook]:
        """Get webhook by ID"""
        pass

    @abstractmethod
    async def list_by_account_id(self, account_id: UUID) -> List[Webhook]:
        """Get all webhooks of an account"""
        pass

    @abstractmethod
    async def list_active_by_account_id(self, account_id: UUID) -> List[Webhook]:
        """Get active webhooks of an account"""
        pass

    @abstractmethod
    async def create(self, webhook: Webhook) -> Webhook:
        """Create a new webhook"""
        pass

    @abstractmethod
    async def update(self, webhook: Webhook) -> Webhook:
        """Update existing webhook"""
        pass

    @abstractmethod
    async def delete(self, webhook: Webhook) -> None:
        """Delete a webhook"""
        pass
