"""
License Ledger

Validates license keys for registration and moves their capacity counter.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from primeauth.app.services.unit_of_work import UnitOfWork
from primeauth.domain.entities import AuthFailure, LicenseKey

INVALID_LICENSE_MESSAGE = "Invalid license key"
LICENSE_EXPIRED_MESSAGE = "License key has expired"
LICENSE_FULL_MESSAGE = "License key has reached maximum user limit"


class LicenseLedger:
    """
    Business Rules:
    - A license is usable when it exists, is active, belongs to the
      application, has not expired and has a free slot
    - 0 <= current_users <= max_users always holds; consume/release are
      single conditional UPDATEs
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def validate(
        self, license_key: str, application_id: UUID, now: Optional[datetime] = None
    ) -> Result[LicenseKey]:
        license = await self.uow.license_keys.get_by_key(license_key)
        if (
            license is None
            or not license.is_active
            or license.application_id != application_id
        ):
            return Return.err(Error(AuthFailure.INVALID_LICENSE.value, INVALID_LICENSE_MESSAGE))

        if license.is_expired(now):
            return Return.err(Error(AuthFailure.LICENSE_EXPIRED.value, LICENSE_EXPIRED_MESSAGE))

        if not license.has_capacity():
            return Return.err(Error(AuthFailure.LICENSE_FULL.value, LICENSE_FULL_MESSAGE))

        return Return.ok(license)

    async def consume(self, license_key_id: UUID) -> Result[None]:
        taken = await self.uow.license_keys.try_increment_users(license_key_id)
        if not taken:
            return Return.err(Error(AuthFailure.LICENSE_FULL.value, LICENSE_FULL_MESSAGE))
        return Return.ok()

    async def release(self, license_key_id: UUID) -> bool:
        return await self.uow.license_keys.decrement_users(license_key_id)
