from typing import List, Optional
from uuid import UUID

from libs.result import Result, Return
from primeauth.app.services.console_access import load_active_account, load_managed_application
from primeauth.app.services.unit_of_work import UnitOfWork

from .dtos import BlacklistEntryInfo


class ListBlacklistEntriesUseCase:
    """
    Active rules visible to the caller.

    With application_id: that application's rules plus global ones.
    Without: rules of every application the caller owns plus global ones.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, account_id: UUID, application_id: Optional[UUID] = None
    ) -> Result[List[BlacklistEntryInfo]]:
        async with self.uow:
            if application_id is not None:
                access = await load_managed_application(self.uow, account_id, application_id)
                if access.is_err():
                    return access
                application_ids = [application_id]
            else:
                account_result = await load_active_account(self.uow, account_id)
                if account_result.is_err():
                    return account_result
                applications = await self.uow.applications.list_by_account_id(account_id)
                application_ids = [a.id for a in applications]

            entries = await self.uow.blacklist.list_active(application_ids, include_global=True)
            return Return.ok([BlacklistEntryInfo.model_validate(e) for e in entries])
