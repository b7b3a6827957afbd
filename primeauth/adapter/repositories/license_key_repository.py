from typing import List, Optional
from uuid import UUID

from sqlmodel import select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from primeauth.app.repositories.license_key_repository import ILicenseKeyRepository
from primeauth.domain.entities import LicenseKey


class LicenseKeyRepository(ILicenseKeyRepository):
    """LicenseKey repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, license_key_id: UUID) -> Optional[LicenseKey]:
        """Get license key by ID"""
        stmt = select(LicenseKey).where(LicenseKey.id == license_key_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_key(self, license_key: str) -> Optional[LicenseKey]:
        """Get license key by its key string"""
        stmt = select(LicenseKey).where(LicenseKey.license_key == license_key)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_by_application_id(self, application_id: UUID) -> List[LicenseKey]:
        """Get all license keys of an application, newest first"""
        stmt = (
            select(LicenseKey)
            .where(LicenseKey.application_id == application_id)
            .order_by(LicenseKey.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, license_key: LicenseKey) -> LicenseKey:
        """Create a new license key"""
        self.session.add(license_key)
        await self.session.flush()
        await self.session.refresh(license_key)
        return license_key

    async def update(self, license_key: LicenseKey) -> LicenseKey:
        """Update existing license key"""
        self.session.add(license_key)
        await self.session.flush()
        await self.session.refresh(license_key)
        return license_key

    async def try_increment_users(self, license_key_id: UUID) -> bool:
        """
        Take one slot with a single conditional UPDATE.

        The capacity check lives in the WHERE clause so two concurrent
        registrations can never both take the last slot.
        """
        stmt = (
            update(LicenseKey)
            .where(
                LicenseKey.id == license_key_id,
                LicenseKey.is_active == True,
                LicenseKey.current_users < LicenseKey.max_users,
            )
            .values(current_users=LicenseKey.current_users + 1)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def decrement_users(self, license_key_id: UUID) -> bool:
        """Give one slot back, floored at zero"""
        stmt = (
            update(LicenseKey)
            .where(LicenseKey.id == license_key_id, LicenseKey.current_users > 0)
            .values(current_users=LicenseKey.current_users - 1)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
