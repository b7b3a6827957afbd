"""
Remove Blacklist Entry Use Case

Deactivates the rule; rows are kept for history.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from primeauth.app.services.activity_recorder import ActivityRecorder
from primeauth.app.services.console_access import load_active_account
from primeauth.app.services.unit_of_work import UnitOfWork
from primeauth.domain.entities import Permission
from primeauth.domain.permissions import can_manage_application, has_permission

from .add_blacklist_entry_use_case import global_rules_forbidden
from .dtos import BlacklistEntryInfo


def entry_not_found() -> Error:
    return Error("BLACKLIST_ENTRY_NOT_FOUND", "Blacklist entry not found")


class RemoveBlacklistEntryUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, account_id: UUID, entry_id: UUID) -> Result[BlacklistEntryInfo]:
        async with self.uow:
            account_result = await load_active_account(self.uow, account_id)
            if account_result.is_err():
                return account_result
            account = account_result.value

            entry = await self.uow.blacklist.get_by_id(entry_id)
            if entry is None or not entry.is_active:
                return Return.err(entry_not_found())

            if entry.application_id is None:
                if not has_permission(account, Permission.manage_users):
                    return Return.err(global_rules_forbidden())
            else:
                application = await self.uow.applications.get_by_id(entry.application_id)
                if not can_manage_application(account, application):
                    return Return.err(entry_not_found())

            entry.is_active = False
            entry = await self.uow.blacklist.update(entry)
            await self.uow.commit()

            info = BlacklistEntryInfo.model_validate(entry)

            await ActivityRecorder(self.uow).record(
                event="blacklist_removed",
                success=True,
                application_id=info.application_id,
                metadata={
                    "account_id": str(account_id),
                    "entry_id": str(entry_id),
                    "type": info.type.value,
                },
            )

            return Return.ok(info)
