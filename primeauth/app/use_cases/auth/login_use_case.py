"""
Login Use Case

Authenticates an app user and issues a session token.
"""

import logging
from datetime import datetime
from typing import Optional

from libs.result import Result, Return
from primeauth.app.services.blacklist_filter import BLOCKED_MESSAGES, BlacklistFilter
from primeauth.app.services.device_guard import DeviceGuard, short_hwid
from primeauth.app.services.passwords import dummy_verify, verify_password
from primeauth.app.services.session_tracker import SessionTracker
from primeauth.domain.entities import AuthFailure, BlacklistType

from .base import INVALID_API_KEY_MESSAGE, AuthFlowUseCase, fail
from .dtos import ClientInfo, LoginCommand, LoginResponse

logger = logging.getLogger(__name__)


class LoginUseCase(AuthFlowUseCase):
    """
    Use case for end-user login.

    Guards run in a fixed order and the first failing one wins:
    api key -> blacklist (ip, username, hwid) -> unknown user -> disabled
    -> paused -> expired -> version -> hwid -> password.

    Business Rules:
    - Unknown users still cost one bcrypt comparison and get the same
      message as a wrong password
    - A wrong password increments login_attempts and never binds a HWID
    - First successful login on a HWID-locked application binds the HWID
    - Success resets login_attempts and opens a new session
    """

    operation = "login"

    async def execute(
        self, command: LoginCommand, client: Optional[ClientInfo] = None
    ) -> Result[LoginResponse]:
        return await self._guarded(self._login(command, client or ClientInfo()))

    async def _login(self, command: LoginCommand, client: ClientInfo) -> Result[LoginResponse]:
        async with self.uow:
            application = await self._resolve_application(command.api_key)
            if application is None:
                return fail(AuthFailure.INVALID_API_KEY, INVALID_API_KEY_MESSAGE)

            application_id = application.id
            account_id = application.account_id

            async def reject(
                failure: AuthFailure,
                message: str,
                event: str,
                app_user_id=None,
                metadata: Optional[dict] = None,
            ) -> Result[LoginResponse]:
                await self._record(
                    event,
                    False,
                    application_id,
                    account_id,
                    client,
                    app_user_id=app_user_id,
                    hwid=command.hwid,
                    metadata={"username": command.username, **(metadata or {})},
                    error_message=message,
                )
                return fail(failure, message)

            # Blacklist
            blocked = await BlacklistFilter(self.uow).find_block(
                application_id,
                [
                    (BlacklistType.ip, client.ip_address),
                    (BlacklistType.username, command.username),
                    (BlacklistType.hwid, command.hwid),
                ],
            )
            if blocked is not None:
                logger.info(
                    "Login blocked by %s rule application_id=%s", blocked.type.value, application_id
                )
                return await reject(
                    AuthFailure.BLACKLISTED,
                    BLOCKED_MESSAGES[blocked.type],
                    f"login_blocked_{blocked.type.value}",
                    metadata={"reason": blocked.reason},
                )

            # Unknown user
            failed_message = application.login_failed_message
            user = await self.uow.app_users.get_by_username(application_id, command.username)
            if user is None:
                dummy_verify(command.password)
                return await reject(
                    AuthFailure.INVALID_CREDENTIALS,
                    failed_message,
                    "login_failed",
                    metadata={"reason": "unknown_user"},
                )

            user_id = user.id
            now = datetime.utcnow()

            # Account status
            if not user.is_active:
                return await reject(
                    AuthFailure.ACCOUNT_DISABLED,
                    application.account_disabled_message,
                    "account_disabled",
                    app_user_id=user_id,
                )

            if user.is_paused:
                return await reject(
                    AuthFailure.ACCOUNT_PAUSED,
                    application.account_paused_message,
                    "account_paused",
                    app_user_id=user_id,
                )

            if user.is_expired(now):
                return await reject(
                    AuthFailure.ACCOUNT_EXPIRED,
                    application.account_expired_message,
                    "account_expired",
                    app_user_id=user_id,
                    metadata={"expired_at": user.expires_at.isoformat()},
                )

            # Version and HWID
            decision = DeviceGuard.evaluate(application, user, command.version, command.hwid)
            if not decision.ok:
                message = DeviceGuard.failure_message(application, decision.failure)
                if decision.failure == AuthFailure.VERSION_MISMATCH:
                    return await reject(
                        decision.failure,
                        message,
                        "version_mismatch",
                        app_user_id=user_id,
                        metadata={
                            "client_version": command.version,
                            "required_version": application.version,
                        },
                    )
                logger.info(
                    "HWID check failed application_id=%s user_id=%s hwid=%s",
                    application_id,
                    user_id,
                    short_hwid(command.hwid),
                )
                return await reject(
                    decision.failure,
                    message,
                    "hwid_mismatch",
                    app_user_id=user_id,
                    metadata={"reason": decision.failure.value.lower()},
                )

            # Password
            if not verify_password(command.password, user.password_hash):
                await self.uow.app_users.record_failed_attempt(user_id, now)
                return await reject(
                    AuthFailure.INVALID_CREDENTIALS,
                    failed_message,
                    "login_failed",
                    app_user_id=user_id,
                    metadata={"reason": "bad_password"},
                )

            # Success
            hwid_bound = DeviceGuard.commit(user, decision)
            user.login_attempts = 0
            user.last_login_at = now
            user.last_login_attempt_at = now
            user.last_login_ip = client.ip_address
            user = await self.uow.app_users.update(user)

            session = await SessionTracker(self.uow).create(
                application_id,
                user_id,
                ip_address=client.ip_address,
                hwid=command.hwid,
                user_agent=client.user_agent,
                now=now,
            )
            await self.uow.commit()

            response = LoginResponse(
                message=application.login_success_message,
                user_id=str(user_id),
                session_token=session.session_token,
                username=user.username,
                email=user.email,
                expires_at=user.expires_at,
                hwid_locked=application.hwid_lock_enabled,
            )
            logger.info(
                "App user logged in application_id=%s user_id=%s hwid_bound=%s",
                application_id,
                user_id,
                hwid_bound,
            )

            await self._record(
                "user_login",
                True,
                application_id,
                account_id,
                client,
                app_user_id=user_id,
                hwid=command.hwid,
                metadata={
                    "username": user.username,
                    "session_id": str(session.id),
                    "hwid_bound": hwid_bound,
                },
                user_data={
                    "id": str(user_id),
                    "username": user.username,
                    "email": user.email,
                    "hwid": user.hwid,
                    "ip_address": client.ip_address,
                    "user_agent": client.user_agent,
                },
            )

            return Return.ok(response)
