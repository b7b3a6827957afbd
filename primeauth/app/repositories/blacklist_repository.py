from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from primeauth.domain.entities import BlacklistEntry, BlacklistType


class IBlacklistRepository(ABC):
    """Blacklist repository interface - application layer"""

    @abstractmethod
    async def find_active_match(
        self, application_id: Optional[UUID], type: BlacklistType, value: str
    ) -> Optional[BlacklistEntry]:
        """
        Find an active entry for (type, value) scoped to the application or
        global (application_id IS NULL). Application-scoped entries win.
        """
        pass

    @abstractmethod
    async def get_active_exact(
        self, application_id: Optional[UUID], type: BlacklistType, value: str
    ) -> Optional[BlacklistEntry]:
        """Find the active entry for exactly this (application_id, type, value)"""
        pass

    @abstractmethod
    async def get_by_id(self, entry_id: UUID) -> Optional[BlacklistEntry]:
        """Get blacklist entry by ID"""
        pass

    @abstractmethod
    async def list_active(self, application_ids: List[UUID], include_global: bool) -> List[BlacklistEntry]:
        """Get active entries for the given applications, optionally with global ones"""
        pass

    @abstractmethod
    async def create(self, entry: BlacklistEntry) -> BlacklistEntry:
        """Create a new blacklist entry"""
        pass

    @abstractmethod
    async def update(self, entry: BlacklistEntry) -> BlacklistEntry:
        """Update existing blacklist entry"""
        pass
