from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, func
from sqlmodel import select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from primeauth.app.repositories.active_session_repository import IActiveSessionRepository
from primeauth.domain.entities import ActiveSession


class ActiveSessionRepository(IActiveSessionRepository):
    """ActiveSession repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, session_id: UUID) -> Optional[ActiveSession]:
        """Get session by ID"""
        stmt = select(ActiveSession).where(ActiveSession.id == session_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_token(self, session_token: str) -> Optional[ActiveSession]:
        """Get session by token"""
        stmt = select(ActiveSession).where(ActiveSession.session_token == session_token)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, session_obj: ActiveSession) -> ActiveSession:
        """Create a new session"""
        self.session.add(session_obj)
        await self.session.flush()
        await self.session.refresh(session_obj)
        return session_obj

    async def touch(self, session_token: str, at: datetime) -> bool:
        """Refresh last_activity_at of an active session"""
        stmt = (
            update(ActiveSession)
            .where(
                ActiveSession.session_token == session_token,
                ActiveSession.is_active == True,
            )
            .values(last_activity_at=at)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def end_by_token(self, session_token: str, application_id: Optional[UUID] = None) -> bool:
        """Deactivate an active session, optionally restricted to one application"""
        conditions = [
            ActiveSession.session_token == session_token,
            ActiveSession.is_active == True,
        ]
        if application_id is not None:
            conditions.append(ActiveSession.application_id == application_id)

        stmt = (
            update(ActiveSession)
            .where(*conditions)
            .values(is_active=False)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def end_by_id(self, session_id: UUID) -> bool:
        """Deactivate an active session by ID"""
        stmt = (
            update(ActiveSession)
            .where(ActiveSession.id == session_id, ActiveSession.is_active == True)
            .values(is_active=False)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def list_active_by_application_id(self, application_id: UUID) -> List[ActiveSession]:
        """Get all active sessions of an application, most recently used first"""
        stmt = (
            select(ActiveSession)
            .where(
                ActiveSession.application_id == application_id,
                ActiveSession.is_active == True,
            )
            .order_by(ActiveSession.last_activity_at.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count_active_by_application_id(self, application_id: UUID) -> int:
        """Count active sessions of an application"""
        stmt = select(func.count()).select_from(ActiveSession).where(
            ActiveSession.application_id == application_id,
            ActiveSession.is_active == True,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def deactivate_expired(self, now: datetime) -> int:
        """Deactivate every active session past its expiry"""
        stmt = (
            update(ActiveSession)
            .where(
                ActiveSession.is_active == True,
                ActiveSession.expires_at.is_not(None),
                ActiveSession.expires_at < now,
            )
            .values(is_active=False)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def delete_by_app_user_id(self, app_user_id: UUID) -> int:
        """Delete all sessions of an app user"""
        stmt = delete(ActiveSession).where(ActiveSession.app_user_id == app_user_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
