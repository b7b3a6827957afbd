from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from primeauth.app.repositories.application_repository import IApplicationRepository
from primeauth.domain.entities import Application


class ApplicationRepository(IApplicationRepository):
    """Application repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, application_id: UUID) -> Optional[Application]:
        """Get application by ID"""
        stmt = select(Application).where(Application.id == application_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_api_key(self, api_key: str) -> Optional[Application]:
        """Resolve an application from its API key"""
        stmt = select(Application).where(Application.api_key == api_key)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_by_account_id(self, account_id: UUID) -> List[Application]:
        """Get all applications owned by an account, newest first"""
        stmt = (
            select(Application)
            .where(Application.account_id == account_id)
            .order_by(Application.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, application: Application) -> Application:
        """Create a new application"""
        self.session.add(application)
        await self.session.flush()
        await self.session.refresh(application)
        return application

    async def update(self, application: Application) -> Application:
        """Update existing application"""
        self.session.add(application)
        await self.session.flush()
        await self.session.refresh(application)
        return application
