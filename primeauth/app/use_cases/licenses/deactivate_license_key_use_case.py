"""
Deactivate License Key Use Case

License keys are never deleted; deactivation stops new registrations.
Users already registered under the key keep working.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from primeauth.app.services.activity_recorder import ActivityRecorder
from primeauth.app.services.console_access import load_managed_application
from primeauth.app.services.unit_of_work import UnitOfWork

from .dtos import LicenseKeyInfo


class DeactivateLicenseKeyUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, account_id: UUID, application_id: UUID, license_key_id: UUID
    ) -> Result[LicenseKeyInfo]:
        async with self.uow:
            access = await load_managed_application(self.uow, account_id, application_id)
            if access.is_err():
                return access

            license = await self.uow.license_keys.get_by_id(license_key_id)
            if license is None or license.application_id != application_id:
                return Return.err(Error("LICENSE_NOT_FOUND", "License key not found"))

            license.is_active = False
            license = await self.uow.license_keys.update(license)
            await self.uow.commit()

            info = LicenseKeyInfo.model_validate(license)

            await ActivityRecorder(self.uow).record(
                event="license_deactivated",
                success=True,
                application_id=application_id,
                metadata={"account_id": str(account_id), "license_key_id": str(license_key_id)},
            )

            return Return.ok(info)
