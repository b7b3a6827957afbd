from uuid import UUID

from libs.result import Error, Result, Return
from primeauth.app.services.activity_recorder import ActivityRecorder
from primeauth.app.services.console_access import load_active_account
from primeauth.app.services.unit_of_work import UnitOfWork


class DeleteWebhookUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, account_id: UUID, webhook_id: UUID) -> Result[dict]:
        async with self.uow:
            account_result = await load_active_account(self.uow, account_id)
            if account_result.is_err():
                return account_result

            webhook = await self.uow.webhooks.get_by_id(webhook_id)
            if webhook is None or webhook.account_id != account_id:
                return Return.err(Error("WEBHOOK_NOT_FOUND", "Webhook not found"))

            await self.uow.webhooks.delete(webhook)
            await self.uow.commit()

            await ActivityRecorder(self.uow).record(
                event="webhook_deleted",
                success=True,
                metadata={"account_id": str(account_id), "webhook_id": str(webhook_id)},
            )

            return Return.ok({"webhook_id": str(webhook_id), "deleted": True})
