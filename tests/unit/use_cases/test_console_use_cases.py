import re
from uuid import uuid4

import pytest

from primeauth.app.use_cases.app_users import DeleteAppUserUseCase
from primeauth.app.use_cases.blacklist import AddBlacklistEntryCommand, AddBlacklistEntryUseCase
from primeauth.app.use_cases.licenses import CreateLicenseKeysCommand, CreateLicenseKeysUseCase
from primeauth.domain.entities import (
    Account,
    AccountRole,
    AppUser,
    Application,
    BlacklistEntry,
    BlacklistType,
    Permission,
)


def _returns_argument(entity):
    return entity


@pytest.fixture
def account():
    return Account(email="owner@example.com")


@pytest.fixture
def application(account):
    return Application(account_id=account.id, name="Prime Tool")


@pytest.fixture
def console_uow(mock_uow, account, application):
    mock_uow.accounts.get_by_id.return_value = account
    mock_uow.applications.get_by_id.return_value = application
    mock_uow.license_keys.get_by_key.return_value = None
    mock_uow.license_keys.create.side_effect = _returns_argument
    mock_uow.blacklist.get_active_exact.return_value = None
    mock_uow.blacklist.create.side_effect = _returns_argument
    return mock_uow


# ============================================================================
# License keys
# ============================================================================


@pytest.mark.asyncio
async def test_create_generated_license_keys(console_uow, account, application):
    command = CreateLicenseKeysCommand(max_users=5, validity_days=30, count=3)

    result = await CreateLicenseKeysUseCase(console_uow).execute(account.id, application.id, command)

    assert result.is_ok()
    keys = result.value
    assert len(keys) == 3
    assert len({k.license_key for k in keys}) == 3
    for key in keys:
        assert re.fullmatch(r"[A-Z0-9]{5}(-[A-Z0-9]{5}){3}", key.license_key)
        assert key.max_users == 5
        assert key.current_users == 0
        assert (key.expires_at - key.created_at).days == 30
    assert console_uow.activity_logs.create.call_args.args[0].event == "license_created"


@pytest.mark.asyncio
async def test_create_explicit_license_key_conflict(console_uow, account, application):
    console_uow.license_keys.get_by_key.return_value = object()
    command = CreateLicenseKeysCommand(license_key="TAKEN", validity_days=30)

    result = await CreateLicenseKeysUseCase(console_uow).execute(account.id, application.id, command)

    assert result.error.code == "LICENSE_KEY_EXISTS"
    console_uow.license_keys.create.assert_not_called()


@pytest.mark.asyncio
async def test_create_license_keys_for_foreign_application(console_uow, account):
    console_uow.applications.get_by_id.return_value = Application(account_id=uuid4(), name="Other")
    command = CreateLicenseKeysCommand(validity_days=30)

    result = await CreateLicenseKeysUseCase(console_uow).execute(account.id, uuid4(), command)

    assert result.error.code == "APPLICATION_NOT_FOUND"


# ============================================================================
# Blacklist
# ============================================================================


@pytest.mark.asyncio
async def test_global_blacklist_entry_requires_manage_users(console_uow, account):
    command = AddBlacklistEntryCommand(type=BlacklistType.ip, value="1.2.3.4")

    result = await AddBlacklistEntryUseCase(console_uow).execute(account.id, command)

    assert result.error.code == "FORBIDDEN"
    console_uow.blacklist.create.assert_not_called()


@pytest.mark.asyncio
async def test_global_blacklist_entry_with_permission(console_uow, account):
    account.permissions = [Permission.manage_users.value]
    command = AddBlacklistEntryCommand(type=BlacklistType.ip, value=" 1.2.3.4 ", reason="abuse")

    result = await AddBlacklistEntryUseCase(console_uow).execute(account.id, command)

    assert result.is_ok()
    assert result.value.application_id is None
    assert result.value.value == "1.2.3.4"
    assert result.value.created_by == account.id


@pytest.mark.asyncio
async def test_owner_role_may_add_global_entries(console_uow, account):
    account.role = AccountRole.owner
    command = AddBlacklistEntryCommand(type=BlacklistType.hwid, value="HWID-X")

    result = await AddBlacklistEntryUseCase(console_uow).execute(account.id, command)

    assert result.is_ok()


@pytest.mark.asyncio
async def test_duplicate_active_blacklist_entry(console_uow, account, application):
    console_uow.blacklist.get_active_exact.return_value = BlacklistEntry(
        application_id=application.id, type=BlacklistType.username, value="mallory"
    )
    command = AddBlacklistEntryCommand(
        type=BlacklistType.username, value="mallory", application_id=application.id
    )

    result = await AddBlacklistEntryUseCase(console_uow).execute(account.id, command)

    assert result.error.code == "BLACKLIST_ENTRY_EXISTS"


# ============================================================================
# App users
# ============================================================================


@pytest.mark.asyncio
async def test_delete_app_user_cascades_and_releases_license(console_uow, account, application):
    license_key_id = uuid4()
    user = AppUser(
        application_id=application.id,
        license_key_id=license_key_id,
        username="alice",
        password_hash="x",
    )
    console_uow.app_users.get_by_id.return_value = user
    console_uow.active_sessions.delete_by_app_user_id.return_value = 2
    console_uow.activity_logs.delete_by_app_user_id.return_value = 7
    console_uow.license_keys.decrement_users.return_value = True

    result = await DeleteAppUserUseCase(console_uow).execute(account.id, application.id, user.id)

    assert result.is_ok()
    assert result.value == {"app_user_id": str(user.id), "deleted": True}
    console_uow.app_users.delete.assert_called_once_with(user)
    console_uow.license_keys.decrement_users.assert_called_once_with(license_key_id)

    log = console_uow.activity_logs.create.call_args.args[0]
    assert log.event == "user_deleted"
    assert log.app_user_id is None
    assert log.event_metadata["sessions_deleted"] == 2
    assert log.event_metadata["logs_deleted"] == 7


@pytest.mark.asyncio
async def test_delete_app_user_of_other_application(console_uow, account, application):
    console_uow.app_users.get_by_id.return_value = AppUser(
        application_id=uuid4(), username="alice", password_hash="x"
    )

    result = await DeleteAppUserUseCase(console_uow).execute(account.id, application.id, uuid4())

    assert result.error.code == "USER_NOT_FOUND"
    console_uow.app_users.delete.assert_not_called()
