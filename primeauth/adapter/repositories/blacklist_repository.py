from typing import List, Optional
from uuid import UUID

from sqlalchemy import or_
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from primeauth.app.repositories.blacklist_repository import IBlacklistRepository
from primeauth.domain.entities import BlacklistEntry, BlacklistType


class BlacklistRepository(IBlacklistRepository):
    """Blacklist repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_active_match(
        self, application_id: Optional[UUID], type: BlacklistType, value: str
    ) -> Optional[BlacklistEntry]:
        """Find an active entry scoped to the application or global"""
        if application_id is None:
            scope = BlacklistEntry.application_id.is_(None)
        else:
            scope = or_(
                BlacklistEntry.application_id == application_id,
                BlacklistEntry.application_id.is_(None),
            )

        stmt = select(BlacklistEntry).where(
            BlacklistEntry.type == type,
            BlacklistEntry.value == value,
            BlacklistEntry.is_active == True,
            scope,
        )
        result = await self.session.execute(stmt)
        entries = list(result.scalars().all())
        if not entries:
            return None

        # Application-scoped entries take precedence over global ones
        entries.sort(key=lambda e: e.application_id is None)
        return entries[0]

    async def get_active_exact(
        self, application_id: Optional[UUID], type: BlacklistType, value: str
    ) -> Optional[BlacklistEntry]:
        """Find the active entry for exactly this (application_id, type, value)"""
        if application_id is None:
            scope = BlacklistEntry.application_id.is_(None)
        else:
            scope = BlacklistEntry.application_id == application_id

        stmt = select(BlacklistEntry).where(
            BlacklistEntry.type == type,
            BlacklistEntry.value == value,
            BlacklistEntry.is_active == True,
            scope,
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def get_by_id(self, entry_id: UUID) -> Optional[BlacklistEntry]:
        """Get blacklist entry by ID"""
        stmt = select(BlacklistEntry).where(BlacklistEntry.id == entry_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_active(self, application_ids: List[UUID], include_global: bool) -> List[BlacklistEntry]:
        """Get active entries for the given applications, optionally with global ones"""
        conditions = []
        if application_ids:
            conditions.append(BlacklistEntry.application_id.in_(application_ids))
        if include_global:
            conditions.append(BlacklistEntry.application_id.is_(None))
        if not conditions:
            return []

        stmt = (
            select(BlacklistEntry)
            .where(BlacklistEntry.is_active == True, or_(*conditions))
            .order_by(BlacklistEntry.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, entry: BlacklistEntry) -> BlacklistEntry:
        """Create a new blacklist entry"""
        self.session.add(entry)
        await self.session.flush()
        await self.session.refresh(entry)
        return entry

    async def update(self, entry: BlacklistEntry) -> BlacklistEntry:
        """Update existing blacklist entry"""
        self.session.add(entry)
        await self.session.flush()
        await self.session.refresh(entry)
        return entry
