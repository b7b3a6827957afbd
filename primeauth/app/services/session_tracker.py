"""
Session Tracker

Issues, refreshes and ends app-user session tokens. Callers own the commit.
"""

import secrets
from datetime import datetime, timedelta
from typing import Optional
from uuid import UUID

from config import ApplicationConfig
from primeauth.app.services.unit_of_work import UnitOfWork
from primeauth.domain.entities import ActiveSession


def generate_session_token() -> str:
    return secrets.token_urlsafe(48)


class SessionTracker:
    def __init__(self, uow: UnitOfWork, ttl: Optional[timedelta] = None):
        self.uow = uow
        self.ttl = ttl or timedelta(hours=ApplicationConfig.SESSION_TTL_HOURS)

    async def create(
        self,
        application_id: UUID,
        app_user_id: UUID,
        ip_address: Optional[str] = None,
        hwid: Optional[str] = None,
        user_agent: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> ActiveSession:
        now = now or datetime.utcnow()
        session = ActiveSession(
            application_id=application_id,
            app_user_id=app_user_id,
            session_token=generate_session_token(),
            ip_address=ip_address,
            hwid=hwid,
            user_agent=user_agent,
            last_activity_at=now,
            created_at=now,
            expires_at=now + self.ttl,
        )
        return await self.uow.active_sessions.create(session)

    async def find_valid(
        self, session_token: str, application_id: UUID, now: Optional[datetime] = None
    ) -> Optional[ActiveSession]:
        """Active, unexpired session of this application, else None"""
        session = await self.uow.active_sessions.get_by_token(session_token)
        if session is None or not session.is_active:
            return None
        if session.application_id != application_id:
            return None
        if session.is_expired(now):
            return None
        return session

    async def touch(self, session_token: str, now: Optional[datetime] = None) -> bool:
        return await self.uow.active_sessions.touch(session_token, now or datetime.utcnow())

    async def end(self, session_token: str, application_id: Optional[UUID] = None) -> bool:
        return await self.uow.active_sessions.end_by_token(session_token, application_id)

    async def sweep(self, now: Optional[datetime] = None) -> int:
        return await self.uow.active_sessions.deactivate_expired(now or datetime.utcnow())
