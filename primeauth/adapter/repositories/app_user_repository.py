from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import func
from sqlmodel import select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from primeauth.app.repositories.app_user_repository import IAppUserRepository
from primeauth.domain.entities import AppUser


class AppUserRepository(IAppUserRepository):
    """AppUser repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, app_user_id: UUID) -> Optional[AppUser]:
        """Get app user by ID"""
        stmt = select(AppUser).where(AppUser.id == app_user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_username(self, application_id: UUID, username: str) -> Optional[AppUser]:
        """Get app user by username within an application"""
        stmt = select(AppUser).where(
            AppUser.application_id == application_id,
            AppUser.username == username,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_email(self, application_id: UUID, email: str) -> Optional[AppUser]:
        """Get app user by email within an application"""
        stmt = select(AppUser).where(
            AppUser.application_id == application_id,
            AppUser.email == email,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_by_application_id(self, application_id: UUID) -> List[AppUser]:
        """Get all app users of an application, newest first"""
        stmt = (
            select(AppUser)
            .where(AppUser.application_id == application_id)
            .order_by(AppUser.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count_by_application_id(self, application_id: UUID) -> int:
        """Count app users of an application"""
        stmt = select(func.count()).select_from(AppUser).where(
            AppUser.application_id == application_id
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def create(self, app_user: AppUser) -> AppUser:
        """Create a new app user"""
        self.session.add(app_user)
        await self.session.flush()
        await self.session.refresh(app_user)
        return app_user

    async def update(self, app_user: AppUser) -> AppUser:
        """Update existing app user"""
        self.session.add(app_user)
        await self.session.flush()
        await self.session.refresh(app_user)
        return app_user

    async def record_failed_attempt(self, app_user_id: UUID, attempted_at: datetime) -> None:
        """Increment login_attempts in SQL so concurrent failures are all counted"""
        stmt = (
            update(AppUser)
            .where(AppUser.id == app_user_id)
            .values(
                login_attempts=AppUser.login_attempts + 1,
                last_login_attempt_at=attempted_at,
            )
            .execution_options(synchronize_session=False)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete(self, app_user: AppUser) -> None:
        """Hard-delete an app user"""
        await self.session.delete(app_user)
        await self.session.flush()
