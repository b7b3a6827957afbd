from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from primeauth.domain.entities import LicenseKey


class ILicenseKeyRepository(ABC):
    """LicenseKey repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, license_key_id: UUID) -> Optional[LicenseKey]:
        """Get license key by ID"""
        pass

    @abstractmethod
    async def get_by_key(self, license_key: str) -> Optional[LicenseKey]:
        """Get license key by its key string"""
        pass

    @abstractmethod
    async def list_by_application_id(self, application_id: UUID) -> List[LicenseKey]:
        """Get all license keys of an application"""
        pass

    @abstractmethod
    async def create(self, license_key: LicenseKey) -> LicenseKey:
        """Create a new license key"""
        pass

    @abstractmethod
    async def update(self, license_key: LicenseKey) -> LicenseKey:
        """Update existing license key"""
        pass

    @abstractmethod
    async def try_increment_users(self, license_key_id: UUID) -> bool:
        """
        Atomically take one slot: current_users + 1 only while active and
        current_users < max_users. Returns False when no slot was taken.
        """
        pass

    @abstractmethod
    async def decrement_users(self, license_key_id: UUID) -> bool:
        """Atomically give one slot back, never going below zero"""
        pass
