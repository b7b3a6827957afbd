from abc import ABC, abstractmethod

from primeauth.app.repositories.account_repository import IAccountRepository
from primeauth.app.repositories.active_session_repository import IActiveSessionRepository
from primeauth.app.repositories.activity_log_repository import IActivityLogRepository
from primeauth.app.repositories.app_user_repository import IAppUserRepository
from primeauth.app.repositories.application_repository import IApplicationRepository
from primeauth.app.repositories.blacklist_repository import IBlacklistRepository
from primeauth.app.repositories.license_key_repository import ILicenseKeyRepository
from primeauth.app.repositories.webhook_repository import IWebhookRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    accounts: IAccountRepository
    applications: IApplicationRepository
    license_keys: ILicenseKeyRepository
    app_users: IAppUserRepository
    blacklist: IBlacklistRepository
    activity_logs: IActivityLogRepository
    active_sessions: IActiveSessionRepository
    webhooks: IWebhookRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
