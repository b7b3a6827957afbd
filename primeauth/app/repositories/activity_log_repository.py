from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Tuple
from uuid import UUID

from primeauth.domain.entities import ActivityLog


class IActivityLogRepository(ABC):
    """ActivityLog repository interface - application layer"""

    @abstractmethod
    async def create(self, activity_log: ActivityLog) -> ActivityLog:
        """Append a new activity log entry (immutable)"""
        pass

    @abstractmethod
    async def get_by_application_paginated(
        self, application_id: UUID, limit: int = 50, cursor: Optional[str] = None
    ) -> Tuple[List[ActivityLog], Optional[str]]:
        """
        Get activity logs for an application with cursor-based pagination.

        Returns:
            Tuple of (logs list, next_cursor)
            - logs: ordered by created_at DESC
            - next_cursor: Cursor for next page, None if no more logs
        """
        pass

    @abstractmethod
    async def get_by_app_user_id(self, app_user_id: UUID, limit: int = 100) -> List[ActivityLog]:
        """Get most recent activity logs of one app user"""
        pass

    @abstractmethod
    async def count_by_event(self, application_id: UUID) -> Dict[str, int]:
        """Count logs per event name for an application"""
        pass

    @abstractmethod
    async def delete_by_app_user_id(self, app_user_id: UUID) -> int:
        """Delete all logs of an app user (cascade on user deletion)"""
        pass
