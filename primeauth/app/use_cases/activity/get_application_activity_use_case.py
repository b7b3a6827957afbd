"""
Get Application Activity Use Case

Activity log of one application, newest first, with cursor pagination.
"""

from typing import Optional
from uuid import UUID

from libs.result import Result, Return
from primeauth.app.services.console_access import load_managed_application
from primeauth.app.services.unit_of_work import UnitOfWork

from .dtos import ActivityLogInfo, ActivityPage


class GetApplicationActivityUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        account_id: UUID,
        application_id: UUID,
        limit: int = 50,
        cursor: Optional[str] = None,
    ) -> Result[ActivityPage]:
        """
        Args:
            limit: Page size
            cursor: next_cursor from the previous page (optional)

        Returns:
            Result with the page of logs and the next cursor, or Error
        """
        async with self.uow:
            access = await load_managed_application(self.uow, account_id, application_id)
            if access.is_err():
                return access

            logs, next_cursor = await self.uow.activity_logs.get_by_application_paginated(
                application_id, limit=limit, cursor=cursor
            )

            return Return.ok(
                ActivityPage(
                    logs=[ActivityLogInfo.model_validate(log) for log in logs],
                    next_cursor=next_cursor,
                )
            )
