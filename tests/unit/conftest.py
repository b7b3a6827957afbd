import pytest
from unittest.mock import AsyncMock, MagicMock

from config import ApplicationConfig

REPOSITORY_METHODS = {
    "accounts": ["get_by_id", "get_by_email", "create", "update"],
    "applications": ["get_by_id", "get_by_api_key", "list_by_account_id", "create", "update"],
    "license_keys": [
        "get_by_id",
        "get_by_key",
        "list_by_application_id",
        "create",
        "update",
        "try_increment_users",
        "decrement_users",
    ],
    "app_users": [
        "get_by_id",
        "get_by_username",
        "get_by_email",
        "list_by_application_id",
        "count_by_application_id",
        "create",
        "update",
        "record_failed_attempt",
        "delete",
    ],
    "blacklist": [
        "find_active_match",
        "get_active_exact",
        "get_by_id",
        "list_active",
        "create",
        "update",
    ],
    "activity_logs": [
        "create",
        "get_by_application_paginated",
        "get_by_app_user_id",
        "count_by_event",
        "delete_by_app_user_id",
    ],
    "active_sessions": [
        "get_by_id",
        "get_by_token",
        "create",
        "touch",
        "end_by_token",
        "end_by_id",
        "list_active_by_application_id",
        "count_active_by_application_id",
        "deactivate_expired",
        "delete_by_app_user_id",
    ],
    "webhooks": [
        "get_by_id",
        "list_by_account_id",
        "list_active_by_account_id",
        "create",
        "update",
        "delete",
    ],
}


def _returns_argument(entity):
    return entity


@pytest.fixture(autouse=True)
def fast_bcrypt(monkeypatch):
    monkeypatch.setattr(ApplicationConfig, "BCRYPT_ROUNDS", 4)


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    for name, methods in REPOSITORY_METHODS.items():
        repository = MagicMock()
        for method in methods:
            setattr(repository, method, AsyncMock())
        setattr(uow, name, repository)

    # Writes hand back the entity they were given
    uow.app_users.create.side_effect = _returns_argument
    uow.app_users.update.side_effect = _returns_argument
    uow.active_sessions.create.side_effect = _returns_argument
    uow.activity_logs.create.side_effect = _returns_argument

    # Nothing blocked, no sessions, no webhooks unless a test says so
    uow.blacklist.find_active_match.return_value = None
    uow.active_sessions.get_by_token.return_value = None
    uow.webhooks.list_active_by_account_id.return_value = []
    return uow
