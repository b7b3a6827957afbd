from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from primeauth.domain.entities import Application


class IApplicationRepository(ABC):
    """Application repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, application_id: UUID) -> Optional[Application]:
        """Get application by ID"""
        pass

    @abstractmethod
    async def get_by_api_key(self, api_key: str) -> Optional[Application]:
        """Resolve an application from its API key (active or not)"""
        pass

    @abstractmethod
    async def list_by_account_id(self, account_id: UUID) -> List[Application]:
        """Get all applications owned by an account"""
        pass

    @abstractmethod
    async def create(self, application: Application) -> Application:
        """Create a new application"""
        pass

    @abstractmethod
    async def update(self, application: Application) -> Application:
        """Update existing application"""
        pass
