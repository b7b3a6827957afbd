"""
Get Application Stats Use Case

Aggregates user, session, license and login counters for the dashboard.
"""

from uuid import UUID

from libs.result import Result, Return
from primeauth.app.services.console_access import load_managed_application
from primeauth.app.services.unit_of_work import UnitOfWork

from .dtos import ApplicationStats

LOGIN_FAILURE_EVENTS = {
    "login_failed",
    "account_disabled",
    "account_paused",
    "account_expired",
    "version_mismatch",
    "hwid_mismatch",
    "login_blocked_ip",
    "login_blocked_username",
    "login_blocked_hwid",
}


class GetApplicationStatsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, account_id: UUID, application_id: UUID) -> Result[ApplicationStats]:
        async with self.uow:
            access = await load_managed_application(self.uow, account_id, application_id)
            if access.is_err():
                return access

            users = await self.uow.app_users.list_by_application_id(application_id)
            licenses = await self.uow.license_keys.list_by_application_id(application_id)
            active_sessions = await self.uow.active_sessions.count_active_by_application_id(application_id)
            events = await self.uow.activity_logs.count_by_event(application_id)

            active_licenses = [lk for lk in licenses if lk.is_active]

            return Return.ok(
                ApplicationStats(
                    application_id=application_id,
                    total_users=len(users),
                    active_users=sum(1 for u in users if u.is_active and not u.is_paused),
                    paused_users=sum(1 for u in users if u.is_paused),
                    active_sessions=active_sessions,
                    total_licenses=len(licenses),
                    active_licenses=len(active_licenses),
                    license_capacity=sum(lk.max_users for lk in active_licenses),
                    license_usage=sum(lk.current_users for lk in licenses),
                    login_successes=events.get("user_login", 0),
                    login_failures=sum(
                        count for event, count in events.items() if event in LOGIN_FAILURE_EVENTS
                    ),
                    events=events,
                )
            )
