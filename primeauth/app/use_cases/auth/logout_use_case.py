"""
Logout Use Case

Ends a session. Idempotent: missing or unknown keys and tokens, and sessions that
are already ended, all report success.
"""

from typing import Optional

from libs.result import Result, Return
from primeauth.app.services.session_tracker import SessionTracker

from .base import AuthFlowUseCase
from .dtos import ClientInfo, LogoutResponse

LOGOUT_MESSAGE = "Logged out successfully"


class LogoutUseCase(AuthFlowUseCase):
    operation = "logout"

    async def execute(
        self,
        api_key: Optional[str],
        session_token: Optional[str],
        client: Optional[ClientInfo] = None,
    ) -> Result[LogoutResponse]:
        return await self._guarded(self._logout(api_key, session_token, client or ClientInfo()))

    async def _logout(
        self, api_key: Optional[str], session_token: Optional[str], client: ClientInfo
    ) -> Result[LogoutResponse]:
        if not api_key or not session_token:
            return Return.ok(LogoutResponse(message=LOGOUT_MESSAGE))

        async with self.uow:
            application = await self._resolve_application(api_key)
            if application is None:
                return Return.ok(LogoutResponse(message=LOGOUT_MESSAGE))

            application_id = application.id
            account_id = application.account_id

            session = await self.uow.active_sessions.get_by_token(session_token)
            ended = await SessionTracker(self.uow).end(session_token, application_id)
            await self.uow.commit()

            if ended:
                await self._record(
                    "session_end",
                    True,
                    application_id,
                    account_id,
                    client,
                    app_user_id=session.app_user_id,
                    hwid=session.hwid,
                    metadata={"session_id": str(session.id)},
                )

            return Return.ok(LogoutResponse(message=LOGOUT_MESSAGE))
