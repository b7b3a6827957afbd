"""
Delete App User Use Case

Hard-deletes an app user together with its sessions and activity logs and
gives its license slot back.
"""

from uuid import UUID

from libs.result import Result, Return
from primeauth.app.services.activity_recorder import ActivityRecorder
from primeauth.app.services.console_access import load_managed_application
from primeauth.app.services.license_ledger import LicenseLedger
from primeauth.app.services.unit_of_work import UnitOfWork

from .manage_app_user_use_case import user_not_found


class DeleteAppUserUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, account_id: UUID, application_id: UUID, app_user_id: UUID) -> Result[dict]:
        async with self.uow:
            access = await load_managed_application(self.uow, account_id, application_id)
            if access.is_err():
                return access

            user = await self.uow.app_users.get_by_id(app_user_id)
            if user is None or user.application_id != application_id:
                return Return.err(user_not_found())

            username = user.username
            license_key_id = user.license_key_id

            sessions_deleted = await self.uow.active_sessions.delete_by_app_user_id(app_user_id)
            logs_deleted = await self.uow.activity_logs.delete_by_app_user_id(app_user_id)
            await self.uow.app_users.delete(user)

            license_released = False
            if license_key_id is not None:
                license_released = await LicenseLedger(self.uow).release(license_key_id)

            await self.uow.commit()

            # The user row is gone, so the entry is not attached to it
            await ActivityRecorder(self.uow).record(
                event="user_deleted",
                success=True,
                application_id=application_id,
                metadata={
                    "account_id": str(account_id),
                    "app_user_id": str(app_user_id),
                    "username": username,
                    "sessions_deleted": sessions_deleted,
                    "logs_deleted": logs_deleted,
                    "license_released": license_released,
                },
            )

            return Return.ok({"app_user_id": str(app_user_id), "deleted": True})
