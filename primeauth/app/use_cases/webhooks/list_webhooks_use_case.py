from typing import List
from uuid import UUID

from libs.result import Result, Return
from primeauth.app.services.console_access import load_active_account
from primeauth.app.services.unit_of_work import UnitOfWork

from .dtos import WebhookInfo


class ListWebhooksUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, account_id: UUID) -> Result[List[WebhookInfo]]:
        async with self.uow:
            account_result = await load_active_account(self.uow, account_id)
            if account_result.is_err():
                return account_result

            webhooks = await self.uow.webhooks.list_by_account_id(account_id)
            return Return.ok([WebhookInfo.from_entity(w) for w in webhooks])
