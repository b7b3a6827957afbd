"""
Add Blacklist Entry Use Case
"""

from uuid import UUID

from libs.result import Error, Result, Return
from primeauth.app.services.activity_recorder import ActivityRecorder
from primeauth.app.services.console_access import load_active_account, load_managed_application
from primeauth.app.services.unit_of_work import UnitOfWork
from primeauth.domain.entities import BlacklistEntry, Permission
from primeauth.domain.permissions import has_permission

from .dtos import AddBlacklistEntryCommand, BlacklistEntryInfo


def global_rules_forbidden() -> Error:
    return Error("FORBIDDEN", "Managing global blacklist entries requires manage_users permission")


class AddBlacklistEntryUseCase:
    """
    Business Rules:
    - Application-scoped rules need access to the application
    - Global rules (application_id None) need the manage_users permission
    - At most one active rule per (application_id, type, value)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, account_id: UUID, command: AddBlacklistEntryCommand) -> Result[BlacklistEntryInfo]:
        value = command.value.strip()
        if not value:
            return Return.err(Error("INVALID_REQUEST", "Blacklist value cannot be empty"))

        async with self.uow:
            if command.application_id is None:
                account_result = await load_active_account(self.uow, account_id)
                if account_result.is_err():
                    return account_result
                if not has_permission(account_result.value, Permission.manage_users):
                    return Return.err(global_rules_forbidden())
            else:
                access = await load_managed_application(self.uow, account_id, command.application_id)
                if access.is_err():
                    return access

            existing = await self.uow.blacklist.get_active_exact(
                command.application_id, command.type, value
            )
            if existing is not None:
                return Return.err(
                    Error("BLACKLIST_ENTRY_EXISTS", "An active blacklist entry already exists for this value")
                )

            entry = BlacklistEntry(
                application_id=command.application_id,
                type=command.type,
                value=value,
                reason=command.reason,
                created_by=account_id,
            )
            entry = await self.uow.blacklist.create(entry)
            await self.uow.commit()

            info = BlacklistEntryInfo.model_validate(entry)

            await ActivityRecorder(self.uow).record(
                event="blacklist_added",
                success=True,
                application_id=command.application_id,
                metadata={
                    "account_id": str(account_id),
                    "entry_id": str(info.id),
                    "type": command.type.value,
                    "reason": command.reason,
                },
            )

            return Return.ok(info)
