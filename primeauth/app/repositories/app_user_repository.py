from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from primeauth.domain.entities import AppUser


class IAppUserRepository(ABC):
    """AppUser repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, app_user_id: UUID) -> Optional[AppUser]:
        """Get app user by ID"""
        pass

    @abstractmethod
    async def get_by_username(self, application_id: UUID, username: str) -> Optional[AppUser]:
        """Get app user by username within an application"""
        pass

    @abstractmethod
    async def get_by_email(self, application_id: UUID, email: str) -> Optional[AppUser]:
        """Get app user by email within an application"""
        pass

    @abstractmethod
    async def list_by_application_id(self, application_id: UUID) -> List[AppUser]:
        """Get all app users of an application"""
        pass

    @abstractmethod
    async def count_by_application_id(self, application_id: UUID) -> int:
        """Count app users of an application"""
        pass

    @abstractmethod
    async def create(self, app_user: AppUser) -> AppUser:
        """Create a new app user"""
        pass

    @abstractmethod
    async def update(self, app_user: AppUser) -> AppUser:
        """Update existing app user"""
        pass

    @abstractmethod
    async def record_failed_attempt(self, app_user_id: UUID, attempted_at: datetime) -> None:
        """Atomically increment login_attempts and stamp last_login_attempt_at"""
        pass

    @abstractmethod
    async def delete(self, app_user: AppUser) -> None:
        """Hard-delete an app user"""
        pass
