"""
Create Application Use Case
"""

from uuid import UUID

from libs.result import Result, Return
from primeauth.app.services.activity_recorder import ActivityRecorder
from primeauth.app.services.console_access import load_active_account
from primeauth.app.services.unit_of_work import UnitOfWork
from primeauth.domain.entities import Application

from .dtos import ApplicationInfo, CreateApplicationCommand


class CreateApplicationUseCase:
    """
    Business Rules:
    - Caller account must exist and be active
    - A fresh API key (pa_ prefix) is generated by the entity
    - Tenant messages start from platform defaults
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, account_id: UUID, command: CreateApplicationCommand) -> Result[ApplicationInfo]:
        async with self.uow:
            account_result = await load_active_account(self.uow, account_id)
            if account_result.is_err():
                return account_result

            application = Application(
                account_id=account_id,
                name=command.name,
                description=command.description,
                version=command.version,
                hwid_lock_enabled=command.hwid_lock_enabled,
            )
            application = await self.uow.applications.create(application)
            await self.uow.commit()

            info = ApplicationInfo.model_validate(application)

            await ActivityRecorder(self.uow).record(
                event="application_created",
                success=True,
                application_id=info.id,
                metadata={"account_id": str(account_id), "name": info.name},
            )

            return Return.ok(info)
