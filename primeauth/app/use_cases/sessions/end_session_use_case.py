"""
End Session Use Case

Owner-side termination of one app-user session.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from primeauth.app.services.activity_recorder import ActivityRecorder
from primeauth.app.services.console_access import load_managed_application
from primeauth.app.services.unit_of_work import UnitOfWork


class EndSessionUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, account_id: UUID, application_id: UUID, session_id: UUID) -> Result[dict]:
        async with self.uow:
            access = await load_managed_application(self.uow, account_id, application_id)
            if access.is_err():
                return access

            session = await self.uow.active_sessions.get_by_id(session_id)
            if session is None or session.application_id != application_id:
                return Return.err(Error("SESSION_NOT_FOUND", "Session not found"))

            app_user_id = session.app_user_id
            ended = await self.uow.active_sessions.end_by_id(session_id)
            await self.uow.commit()

            if ended:
                await ActivityRecorder(self.uow).record(
                    event="session_terminated",
                    success=True,
                    application_id=application_id,
                    app_user_id=app_user_id,
                    metadata={"account_id": str(account_id), "session_id": str(session_id)},
                )

            return Return.ok({"session_id": str(session_id), "ended": ended})
