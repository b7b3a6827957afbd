"""
Rotate API Key Use Case

Replaces an application's API key. The old key stops resolving as soon as
the transaction commits.
"""

from datetime import datetime
from uuid import UUID

from libs.result import Result, Return
from primeauth.app.services.activity_recorder import ActivityRecorder
from primeauth.app.services.console_access import load_managed_application
from primeauth.app.services.unit_of_work import UnitOfWork
from primeauth.domain.entities import generate_api_key

from .dtos import ApplicationInfo


class RotateApiKeyUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, account_id: UUID, application_id: UUID) -> Result[ApplicationInfo]:
        async with self.uow:
            access = await load_managed_application(self.uow, account_id, application_id)
            if access.is_err():
                return access

            _, application = access.value
            application.api_key = generate_api_key()
            application.updated_at = datetime.utcnow()
            application = await self.uow.applications.update(application)
            await self.uow.commit()

            info = ApplicationInfo.model_validate(application)

            await ActivityRecorder(self.uow).record(
                event="api_key_rotated",
                success=True,
                application_id=application_id,
                metadata={"account_id": str(account_id)},
            )

            return Return.ok(info)
