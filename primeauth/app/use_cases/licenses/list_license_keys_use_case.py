from typing import List
from uuid import UUID

from libs.result import Result, Return
from primeauth.app.services.console_access import load_managed_application
from primeauth.app.services.unit_of_work import UnitOfWork

from .dtos import LicenseKeyInfo


class ListLicenseKeysUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, account_id: UUID, application_id: UUID) -> Result[List[LicenseKeyInfo]]:
        async with self.uow:
            access = await load_managed_application(self.uow, account_id, application_id)
            if access.is_err():
                return access

            licenses = await self.uow.license_keys.list_by_application_id(application_id)
            return Return.ok([LicenseKeyInfo.model_validate(lk) for lk in licenses])
