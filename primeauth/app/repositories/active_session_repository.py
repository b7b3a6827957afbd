from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from primeauth.domain.entities import ActiveSession


class IActiveSessionRepository(ABC):
    """ActiveSession repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, session_id: UUID) -> Optional[ActiveSession]:
        """Get session by ID"""
        pass

    @abstractmethod
    async def get_by_token(self, session_token: str) -> Optional[ActiveSession]:
        """Get session by its token (active or not)"""
        pass

    @abstractmethod
    async def create(self, session: ActiveSession) -> ActiveSession:
        """Create a new session"""
        pass

    @abstractmethod
    async def touch(self, session_token: str, at: datetime) -> bool:
        """Set last_activity_at on an active session. Returns True if it existed."""
        pass

    @abstractmethod
    async def end_by_token(self, session_token: str, application_id: Optional[UUID] = None) -> bool:
        """Deactivate an active session. Returns True if a session was ended."""
        pass

    @abstractmethod
    async def end_by_id(self, session_id: UUID) -> bool:
        """Deactivate an active session by ID. Returns True if a session was ended."""
        pass

    @abstractmethod
    async def list_active_by_application_id(self, application_id: UUID) -> List[ActiveSession]:
        """Get all active sessions of an application"""
        pass

    @abstractmethod
    async def count_active_by_application_id(self, application_id: UUID) -> int:
        """Count active sessions of an application"""
        pass

    @abstractmethod
    async def deactivate_expired(self, now: datetime) -> int:
        """Deactivate every active session whose expires_at has passed. Returns count."""
        pass

    @abstractmethod
    async def delete_by_app_user_id(self, app_user_id: UUID) -> int:
        """Delete all sessions of an app user (cascade on user deletion)"""
        pass
