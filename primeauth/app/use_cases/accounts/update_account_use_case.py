"""
Update Account Use Case

Admin changes to role, permissions and active flag. Accounts are never
deleted; is_active=False is the soft delete.
"""

from datetime import datetime
from uuid import UUID

from libs.result import Error, Result, Return
from primeauth.app.services.activity_recorder import ActivityRecorder
from primeauth.app.services.unit_of_work import UnitOfWork
from primeauth.domain.entities import Permission

from .dtos import AccountInfo, UpdateAccountCommand

_KNOWN_PERMISSIONS = {p.value for p in Permission}


class UpdateAccountUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, account_id: UUID, command: UpdateAccountCommand) -> Result[AccountInfo]:
        if command.permissions is not None:
            unknown = sorted(set(command.permissions) - _KNOWN_PERMISSIONS)
            if unknown:
                return Return.err(
                    Error("INVALID_PERMISSION", f"Unknown permissions: {', '.join(unknown)}")
                )

        async with self.uow:
            account = await self.uow.accounts.get_by_id(account_id)
            if account is None:
                return Return.err(Error("ACCOUNT_NOT_FOUND", "Account not found"))

            changes = command.model_dump(exclude_unset=True, exclude_none=True)
            if "permissions" in changes:
                changes["permissions"] = sorted(set(changes["permissions"]))
            for field, value in changes.items():
                setattr(account, field, value)
            account.updated_at = datetime.utcnow()

            account = await self.uow.accounts.update(account)
            await self.uow.commit()

            info = AccountInfo.model_validate(account)

            await ActivityRecorder(self.uow).record(
                event="account_updated",
                success=True,
                metadata={"account_id": str(account_id), "fields": sorted(changes)},
            )

            return Return.ok(info)
