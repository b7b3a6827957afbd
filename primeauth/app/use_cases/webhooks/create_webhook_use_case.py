"""
Create Webhook Use Case
"""

from urllib.parse import urlparse
from uuid import UUID

from libs.result import Error, Result, Return
from primeauth.app.services.activity_recorder import ActivityRecorder
from primeauth.app.services.console_access import load_active_account
from primeauth.app.services.unit_of_work import UnitOfWork
from primeauth.domain.entities import Webhook

from .dtos import CreateWebhookCommand, WebhookInfo


class CreateWebhookUseCase:
    """
    Business Rules:
    - URL must be absolute http(s)
    - Empty events list subscribes to every event
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, account_id: UUID, command: CreateWebhookCommand) -> Result[WebhookInfo]:
        parsed = urlparse(command.url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            return Return.err(
                Error("INVALID_WEBHOOK_URL", "Webhook URL must use HTTP or HTTPS protocol")
            )

        async with self.uow:
            account_result = await load_active_account(self.uow, account_id)
            if account_result.is_err():
                return account_result

            webhook = Webhook(
                account_id=account_id,
                url=command.url,
                secret=command.secret or None,
                events=sorted(set(command.events)),
            )
            webhook = await self.uow.webhooks.create(webhook)
            await self.uow.commit()

            info = WebhookInfo.from_entity(webhook)

            await ActivityRecorder(self.uow).record(
                event="webhook_created",
                success=True,
                metadata={
                    "account_id": str(account_id),
                    "webhook_id": str(info.id),
                    "events": info.events,
                },
            )

            return Return.ok(info)
