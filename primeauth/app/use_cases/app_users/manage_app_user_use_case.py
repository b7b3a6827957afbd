"""
Manage App User Use Case

Pause, unpause and HWID reset for a single app user.
"""

from typing import Any, Callable, Dict
from uuid import UUID

from libs.result import Error, Result, Return
from primeauth.app.services.activity_recorder import ActivityRecorder
from primeauth.app.services.console_access import load_managed_application
from primeauth.app.services.unit_of_work import UnitOfWork
from primeauth.domain.entities import AppUser

from .dtos import AppUserInfo


def user_not_found() -> Error:
    return Error("USER_NOT_FOUND", "User not found")


class ManageAppUserUseCase:
    """
    Business Rules:
    - Paused users are rejected at login with the tenant's paused message
    - Resetting the HWID lets the next successful login bind a new device
    - Every change is written to the activity log
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def pause(self, account_id: UUID, application_id: UUID, app_user_id: UUID) -> Result[AppUserInfo]:
        def apply(user: AppUser) -> Dict[str, Any]:
            user.is_paused = True
            return {}

        return await self._apply(account_id, application_id, app_user_id, "user_paused", apply)

    async def unpause(self, account_id: UUID, application_id: UUID, app_user_id: UUID) -> Result[AppUserInfo]:
        def apply(user: AppUser) -> Dict[str, Any]:
            user.is_paused = False
            return {}

        return await self._apply(account_id, application_id, app_user_id, "user_unpaused", apply)

    async def reset_hwid(self, account_id: UUID, application_id: UUID, app_user_id: UUID) -> Result[AppUserInfo]:
        def apply(user: AppUser) -> Dict[str, Any]:
            had_hwid = user.hwid is not None
            user.hwid = None
            return {"had_hwid": had_hwid}

        return await self._apply(account_id, application_id, app_user_id, "hwid_reset", apply)

    async def _apply(
        self,
        account_id: UUID,
        application_id: UUID,
        app_user_id: UUID,
        event: str,
        apply: Callable[[AppUser], Dict[str, Any]],
    ) -> Result[AppUserInfo]:
        async with self.uow:
            access = await load_managed_application(self.uow, account_id, application_id)
            if access.is_err():
                return access

            user = await self.uow.app_users.get_by_id(app_user_id)
            if user is None or user.application_id != application_id:
                return Return.err(user_not_found())

            extra = apply(user)
            user = await self.uow.app_users.update(user)
            await self.uow.commit()

            info = AppUserInfo.model_validate(user)

            await ActivityRecorder(self.uow).record(
                event=event,
                success=True,
                application_id=application_id,
                app_user_id=app_user_id,
                metadata={"account_id": str(account_id), "username": info.username, **extra},
            )

            return Return.ok(info)
