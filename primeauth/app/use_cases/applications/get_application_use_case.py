from uuid import UUID

from libs.result import Result, Return
from primeauth.app.services.console_access import load_managed_application
from primeauth.app.services.unit_of_work import UnitOfWork

from .dtos import ApplicationInfo


class GetApplicationUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, account_id: UUID, application_id: UUID) -> Result[ApplicationInfo]:
        async with self.uow:
            access = await load_managed_application(self.uow, account_id, application_id)
            if access.is_err():
                return access

            _, application = access.value
            return Return.ok(ApplicationInfo.model_validate(application))
