"""
Blacklist Filter

Checks identity attributes (IP, username, email, HWID) against active block
rules scoped to one application or global. Read-only.
"""

from typing import Optional, Sequence, Tuple
from uuid import UUID

from primeauth.app.services.unit_of_work import UnitOfWork
from primeauth.domain.entities import BlacklistEntry, BlacklistType

BLOCKED_MESSAGES = {
    BlacklistType.ip: "Access denied: IP address is blacklisted",
    BlacklistType.username: "Access denied: Username is blacklisted",
    BlacklistType.email: "Access denied: Email is blacklisted",
    BlacklistType.hwid: "Access denied: Hardware ID is blacklisted",
}


class BlacklistFilter:
    """Values are compared exactly (case-sensitive)."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def is_blocked(self, application_id: Optional[UUID], type: BlacklistType, value: str) -> bool:
        return await self.find_block(application_id, [(type, value)]) is not None

    async def find_block(
        self,
        application_id: Optional[UUID],
        attributes: Sequence[Tuple[BlacklistType, Optional[str]]],
    ) -> Optional[BlacklistEntry]:
        """
        Return the first active entry hit, checking attributes in the given order.

        Attributes with an empty value are skipped.
        """
        for type, value in attributes:
            if not value:
                continue
            entry = await self.uow.blacklist.find_active_match(application_id, type, value)
            if entry is not None:
                return entry
        return None
