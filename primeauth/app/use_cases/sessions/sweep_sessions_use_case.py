"""
Sweep Sessions Use Case

Deactivates every active session past its expiry. Used by the background
sweeper and the admin API.
"""

import logging
from datetime import datetime
from typing import Optional

from libs.result import Result, Return
from primeauth.app.services.session_tracker import SessionTracker
from primeauth.app.services.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class SweepSessionsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, now: Optional[datetime] = None) -> Result[int]:
        async with self.uow:
            count = await SessionTracker(self.uow).sweep(now)
            await self.uow.commit()

        if count:
            logger.info("Deactivated %d expired sessions", count)
        return Return.ok(count)
