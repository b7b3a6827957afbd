from typing import List
from uuid import UUID

from libs.result import Error, Result, Return
from primeauth.app.services.console_access import load_managed_application
from primeauth.app.services.unit_of_work import UnitOfWork

from .dtos import ActivityLogInfo


class GetAppUserActivityUseCase:
    """Most recent activity of one app user"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, account_id: UUID, application_id: UUID, app_user_id: UUID, limit: int = 100
    ) -> Result[List[ActivityLogInfo]]:
        async with self.uow:
            access = await load_managed_application(self.uow, account_id, application_id)
            if access.is_err():
                return access

            user = await self.uow.app_users.get_by_id(app_user_id)
            if user is None or user.application_id != application_id:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            logs = await self.uow.activity_logs.get_by_app_user_id(app_user_id, limit=limit)
            return Return.ok([ActivityLogInfo.model_validate(log) for log in logs])
