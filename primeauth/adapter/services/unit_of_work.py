from sqlmodel.ext.asyncio.session import AsyncSession

from primeauth.adapter.repositories.account_repository import AccountRepository
from primeauth.adapter.repositories.active_session_repository import ActiveSessionRepository
from primeauth.adapter.repositories.activity_log_repository import ActivityLogRepository
from primeauth.adapter.repositories.app_user_repository import AppUserRepository
from primeauth.adapter.repositories.application_repository import ApplicationRepository
from primeauth.adapter.repositories.blacklist_repository import BlacklistRepository
from primeauth.adapter.repositories.license_key_repository import LicenseKeyRepository
from primeauth.adapter.repositories.webhook_repository import WebhookRepository
from primeauth.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.accounts = AccountRepository(self.session)
        self.applications = ApplicationRepository(self.session)
        self.license_keys = LicenseKeyRepository(self.session)
        self.app_users = AppUserRepository(self.session)
        self.blacklist = BlacklistRepository(self.session)
        self.activity_logs = ActivityLogRepository(self.session)
        self.active_sessions = ActiveSessionRepository(self.session)
        self.webhooks = WebhookRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
