import base64
from datetime import datetime
from typing import Dict, List, Optional, Tuple
from uuid import UUID

from sqlalchemy import delete, func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from primeauth.app.repositories.activity_log_repository import IActivityLogRepository
from primeauth.domain.entities import ActivityLog


class ActivityLogRepository(IActivityLogRepository):
    """ActivityLog repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, activity_log: ActivityLog) -> ActivityLog:
        """Append a new activity log entry (immutable)"""
        self.session.add(activity_log)
        await self.session.flush()
        await self.session.refresh(activity_log)
        return activity_log

    async def get_by_application_paginated(
        self, application_id: UUID, limit: int = 50, cursor: Optional[str] = None
    ) -> Tuple[List[ActivityLog], Optional[str]]:
        """
        Get activity logs for an application with cursor-based pagination.

        Cursor format: base64-encoded ISO timestamp of created_at
        """
        stmt = select(ActivityLog).where(ActivityLog.application_id == application_id)

        if cursor:
            try:
                cursor_timestamp_str = base64.b64decode(cursor).decode("utf-8")
                cursor_timestamp = datetime.fromisoformat(cursor_timestamp_str)
                stmt = stmt.where(ActivityLog.created_at < cursor_timestamp)
            except (ValueError, TypeError):
                # Invalid cursor, ignore and return from beginning
                pass

        stmt = stmt.order_by(ActivityLog.created_at.desc()).limit(limit + 1)

        result = await self.session.exec(stmt)
        logs = list(result.all())

        has_more = len(logs) > limit
        if has_more:
            logs = logs[:limit]

        next_cursor = None
        if has_more and logs:
            cursor_timestamp_str = logs[-1].created_at.isoformat()
            next_cursor = base64.b64encode(cursor_timestamp_str.encode("utf-8")).decode("utf-8")

        return logs, next_cursor

    async def get_by_app_user_id(self, app_user_id: UUID, limit: int = 100) -> List[ActivityLog]:
        """Get most recent activity logs of one app user"""
        stmt = (
            select(ActivityLog)
            .where(ActivityLog.app_user_id == app_user_id)
            .order_by(ActivityLog.created_at.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count_by_event(self, application_id: UUID) -> Dict[str, int]:
        """Count logs per event name for an application"""
        stmt = (
            select(ActivityLog.event, func.count())
            .where(ActivityLog.application_id == application_id)
            .group_by(ActivityLog.event)
        )
        result = await self.session.execute(stmt)
        return {event: count for event, count in result.all()}

    async def delete_by_app_user_id(self, app_user_id: UUID) -> int:
        """Delete all logs of an app user"""
        stmt = delete(ActivityLog).where(ActivityLog.app_user_id == app_user_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
