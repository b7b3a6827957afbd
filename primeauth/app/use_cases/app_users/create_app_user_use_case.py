"""
Create App User Use Case

Owner-side user creation, bypassing license keys.
"""

from uuid import UUID

from sqlalchemy.exc import IntegrityError

from libs.result import Error, Result, Return
from primeauth.app.services.activity_recorder import ActivityRecorder
from primeauth.app.services.console_access import load_managed_application
from primeauth.app.services.passwords import hash_password
from primeauth.app.services.unit_of_work import UnitOfWork
from primeauth.domain.entities import AppUser

from .dtos import AppUserInfo, CreateAppUserCommand


def duplicate_user(message: str) -> Error:
    return Error("DUPLICATE_USER", message)


class CreateAppUserUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, account_id: UUID, application_id: UUID, command: CreateAppUserCommand
    ) -> Result[AppUserInfo]:
        async with self.uow:
            access = await load_managed_application(self.uow, account_id, application_id)
            if access.is_err():
                return access

            if await self.uow.app_users.get_by_username(application_id, command.username):
                return Return.err(duplicate_user("Username already exists in this application"))

            if command.email and await self.uow.app_users.get_by_email(application_id, command.email):
                return Return.err(duplicate_user("Email already exists in this application"))

            user = AppUser(
                application_id=application_id,
                username=command.username,
                password_hash=hash_password(command.password),
                email=command.email,
                expires_at=command.expires_at,
            )
            try:
                user = await self.uow.app_users.create(user)
                await self.uow.commit()
            except IntegrityError:
                await self.uow.rollback()
                return Return.err(duplicate_user("Username already exists in this application"))

            info = AppUserInfo.model_validate(user)

            await ActivityRecorder(self.uow).record(
                event="user_created",
                success=True,
                application_id=application_id,
                app_user_id=info.id,
                metadata={"account_id": str(account_id), "username": info.username},
            )

            return Return.ok(info)
