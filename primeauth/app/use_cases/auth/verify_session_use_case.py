"""
Verify Session Use Case

Checks that a session token is live for the calling application.
"""

from datetime import datetime

from libs.result import Result, Return
from primeauth.app.services.session_tracker import SessionTracker
from primeauth.domain.entities import AuthFailure

from .base import INVALID_API_KEY_MESSAGE, AuthFlowUseCase, fail
from .dtos import VerifyResponse

INVALID_SESSION_MESSAGE = "Invalid or expired session"
SESSION_VALID_MESSAGE = "Session is valid"


class VerifySessionUseCase(AuthFlowUseCase):
    """
    Business Rules:
    - Unknown, ended, expired or foreign-application tokens are all
      INVALID_SESSION
    - A valid token has its last_activity_at refreshed
    """

    operation = "verify"

    async def execute(self, api_key: str, session_token: str) -> Result[VerifyResponse]:
        return await self._guarded(self._verify(api_key, session_token))

    async def _verify(self, api_key: str, session_token: str) -> Result[VerifyResponse]:
        async with self.uow:
            application = await self._resolve_application(api_key)
            if application is None:
                return fail(AuthFailure.INVALID_API_KEY, INVALID_API_KEY_MESSAGE)

            tracker = SessionTracker(self.uow)
            now = datetime.utcnow()
            session = await tracker.find_valid(session_token, application.id, now)
            if session is None:
                return fail(AuthFailure.INVALID_SESSION, INVALID_SESSION_MESSAGE)

            user_id = session.app_user_id
            await tracker.touch(session_token, now)
            await self.uow.commit()

            return Return.ok(VerifyResponse(message=SESSION_VALID_MESSAGE, user_id=str(user_id)))
