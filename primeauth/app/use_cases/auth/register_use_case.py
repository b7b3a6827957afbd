"""
Register Use Case

Creates an app user under a license key.
"""

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError

from libs.result import Result, Return
from primeauth.app.services.blacklist_filter import BLOCKED_MESSAGES, BlacklistFilter
from primeauth.app.services.device_guard import short_hwid
from primeauth.app.services.license_ledger import LicenseLedger
from primeauth.app.services.passwords import hash_password
from primeauth.domain.entities import AppUser, AuthFailure, BlacklistType

from .base import INVALID_API_KEY_MESSAGE, AuthFlowUseCase, fail
from .dtos import ClientInfo, RegisterCommand, RegisterResponse

logger = logging.getLogger(__name__)

USERNAME_EXISTS_MESSAGE = "Username already exists"
EMAIL_EXISTS_MESSAGE = "Email already exists"
REGISTER_SUCCESS_MESSAGE = "Registration successful! You can now login with your credentials."


class RegisterUseCase(AuthFlowUseCase):
    """
    Use case for end-user registration.

    Business Rules:
    - API key must resolve to an active application
    - IP, username, email and HWID are checked against the blacklist
    - License must be valid for this application with a free slot
    - Username (and email when given) unique within the application
    - Slot consume and user insert commit together; losing the race for the
      last slot yields LICENSE_FULL, losing a uniqueness race DUPLICATE_USER
    - The new user inherits the license expiry
    """

    operation = "register"

    async def execute(
        self, command: RegisterCommand, client: Optional[ClientInfo] = None
    ) -> Result[RegisterResponse]:
        return await self._guarded(self._register(command, client or ClientInfo()))

    async def _register(self, command: RegisterCommand, client: ClientInfo) -> Result[RegisterResponse]:
        async with self.uow:
            application = await self._resolve_application(command.api_key)
            if application is None:
                return fail(AuthFailure.INVALID_API_KEY, INVALID_API_KEY_MESSAGE)

            application_id = application.id
            account_id = application.account_id

            async def record_failure(event: str, message: str, reason: str) -> None:
                await self._record(
                    event,
                    False,
                    application_id,
                    account_id,
                    client,
                    hwid=command.hwid,
                    metadata={"username": command.username, "reason": reason},
                    error_message=message,
                )

            blocked = await BlacklistFilter(self.uow).find_block(
                application_id,
                [
                    (BlacklistType.ip, client.ip_address),
                    (BlacklistType.username, command.username),
                    (BlacklistType.email, command.email),
                    (BlacklistType.hwid, command.hwid),
                ],
            )
            if blocked is not None:
                message = BLOCKED_MESSAGES[blocked.type]
                logger.info(
                    "Register blocked by %s rule application_id=%s", blocked.type.value, application_id
                )
                await record_failure(f"register_blocked_{blocked.type.value}", message, "blacklisted")
                return fail(AuthFailure.BLACKLISTED, message)

            ledger = LicenseLedger(self.uow)
            validated = await ledger.validate(command.license_key, application_id)
            if validated.is_err():
                error = validated.error
                await record_failure("register_failed", error.message, error.code.lower())
                return Return.err(error)
            license_id = validated.value.id
            license_expires_at = validated.value.expires_at

            if await self.uow.app_users.get_by_username(application_id, command.username):
                await record_failure("register_failed", USERNAME_EXISTS_MESSAGE, "duplicate_username")
                return fail(AuthFailure.DUPLICATE_USER, USERNAME_EXISTS_MESSAGE)

            if command.email and await self.uow.app_users.get_by_email(application_id, command.email):
                await record_failure("register_failed", EMAIL_EXISTS_MESSAGE, "duplicate_email")
                return fail(AuthFailure.DUPLICATE_USER, EMAIL_EXISTS_MESSAGE)

            password_hash = hash_password(command.password)

            consumed = await ledger.consume(license_id)
            if consumed.is_err():
                error = consumed.error
                await self.uow.rollback()
                await record_failure("register_failed", error.message, error.code.lower())
                return Return.err(error)

            user = AppUser(
                application_id=application_id,
                license_key_id=license_id,
                username=command.username,
                password_hash=password_hash,
                email=command.email,
                hwid=command.hwid,
                expires_at=license_expires_at,
            )
            try:
                user = await self.uow.app_users.create(user)
                await self.uow.commit()
            except IntegrityError:
                # Lost a uniqueness race; the slot taken above is rolled back too
                await self.uow.rollback()
                await record_failure("register_failed", USERNAME_EXISTS_MESSAGE, "duplicate_user")
                return fail(AuthFailure.DUPLICATE_USER, USERNAME_EXISTS_MESSAGE)

            response = RegisterResponse(
                message=REGISTER_SUCCESS_MESSAGE,
                user_id=str(user.id),
                username=user.username,
                email=user.email,
                expires_at=user.expires_at,
            )
            logger.info(
                "App user registered application_id=%s user_id=%s hwid=%s",
                application_id,
                user.id,
                short_hwid(command.hwid),
            )

            await self._record(
                "user_register",
                True,
                application_id,
                account_id,
                client,
                app_user_id=user.id,
                hwid=command.hwid,
                metadata={"username": user.username, "license_key_id": str(license_id)},
                user_data={"id": str(user.id), "username": user.username, "email": user.email},
            )

            return Return.ok(response)
