from typing import List
from uuid import UUID

from libs.result import Result, Return
from primeauth.app.services.console_access import load_active_account
from primeauth.app.services.unit_of_work import UnitOfWork

from .dtos import ApplicationInfo


class ListApplicationsUseCase:
    """Applications owned by the caller, newest first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, account_id: UUID) -> Result[List[ApplicationInfo]]:
        async with self.uow:
            account_result = await load_active_account(self.uow, account_id)
            if account_result.is_err():
                return account_result

            applications = await self.uow.applications.list_by_account_id(account_id)
            return Return.ok([ApplicationInfo.model_validate(a) for a in applications])
