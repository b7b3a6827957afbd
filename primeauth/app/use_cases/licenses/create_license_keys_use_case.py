"""
Create License Keys Use Case

Issues one explicit key or up to MAX_BULK_LICENSES generated keys.
"""

import secrets
import string
from datetime import datetime, timedelta
from typing import List
from uuid import UUID

from libs.result import Error, Result, Return
from primeauth.app.services.activity_recorder import ActivityRecorder
from primeauth.app.services.console_access import load_managed_application
from primeauth.app.services.unit_of_work import UnitOfWork
from primeauth.domain.entities import LicenseKey

from .dtos import CreateLicenseKeysCommand, LicenseKeyInfo

_KEY_ALPHABET = string.ascii_uppercase + string.digits


def generate_license_key(groups: int = 4, group_size: int = 5) -> str:
    """Random key shaped like XXXXX-XXXXX-XXXXX-XXXXX"""
    return "-".join(
        "".join(secrets.choice(_KEY_ALPHABET) for _ in range(group_size))
        for _ in range(groups)
    )


class CreateLicenseKeysUseCase:
    """
    Business Rules:
    - validity_days becomes an absolute expires_at at creation
    - Explicit keys must be globally unique (LICENSE_KEY_EXISTS)
    - Generated keys are retried on the rare collision
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, account_id: UUID, application_id: UUID, command: CreateLicenseKeysCommand
    ) -> Result[List[LicenseKeyInfo]]:
        async with self.uow:
            access = await load_managed_application(self.uow, account_id, application_id)
            if access.is_err():
                return access

            if command.license_key is not None:
                if command.count != 1:
                    return Return.err(
                        Error("INVALID_REQUEST", "count must be 1 when license_key is given")
                    )
                if await self.uow.license_keys.get_by_key(command.license_key):
                    return Return.err(Error("LICENSE_KEY_EXISTS", "License key already exists"))
                keys = [command.license_key]
            else:
                keys = []
                while len(keys) < command.count:
                    candidate = generate_license_key()
                    if candidate in keys or await self.uow.license_keys.get_by_key(candidate):
                        continue
                    keys.append(candidate)

            now = datetime.utcnow()
            created = []
            for key in keys:
                license = LicenseKey(
                    application_id=application_id,
                    license_key=key,
                    max_users=command.max_users,
                    validity_days=command.validity_days,
                    expires_at=now + timedelta(days=command.validity_days),
                    description=command.description,
                    created_at=now,
                )
                created.append(await self.uow.license_keys.create(license))
            await self.uow.commit()

            infos = [LicenseKeyInfo.model_validate(lk) for lk in created]

            await ActivityRecorder(self.uow).record(
                event="license_created",
                success=True,
                application_id=application_id,
                metadata={
                    "account_id": str(account_id),
                    "count": len(infos),
                    "max_users": command.max_users,
                    "validity_days": command.validity_days,
                },
            )

            return Return.ok(infos)
