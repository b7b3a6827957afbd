import asyncio
from datetime import datetime, timedelta
from unittest.mock import patch
from uuid import uuid4

import pytest
from sqlalchemy.exc import OperationalError

from config import ApplicationConfig
from primeauth.app.services.passwords import hash_password
from primeauth.app.use_cases.auth import ClientInfo, LoginCommand, LoginUseCase
from primeauth.domain.entities import AppUser, Application, BlacklistEntry, BlacklistType

PASSWORD = "CorrectHorse1!"
CLIENT = ClientInfo(ip_address="10.0.0.5", user_agent="PrimeClient/1.0")


def make_application(**overrides):
    fields = dict(account_id=uuid4(), name="Prime Tool", api_key="pa_test_key", version="1.0.0")
    fields.update(overrides)
    return Application(**fields)


def make_user(application, **overrides):
    fields = dict(
        application_id=application.id,
        username="alice",
        password_hash=hash_password(PASSWORD),
        email="alice@example.com",
    )
    fields.update(overrides)
    return AppUser(**fields)


def command(**overrides):
    fields = dict(api_key="pa_test_key", username="alice", password=PASSWORD)
    fields.update(overrides)
    return LoginCommand(**fields)


def logged_events(mock_uow):
    return [call.args[0].event for call in mock_uow.activity_logs.create.call_args_list]


@pytest.mark.asyncio
async def test_successful_login(mock_uow):
    application = make_application()
    user = make_user(application, login_attempts=3)
    mock_uow.applications.get_by_api_key.return_value = application
    mock_uow.app_users.get_by_username.return_value = user

    result = await LoginUseCase(mock_uow).execute(command(), CLIENT)

    assert result.is_ok()
    data = result.value
    assert data.message == "Login successful!"
    assert data.user_id == str(user.id)
    assert len(data.session_token) >= 64
    assert data.hwid_locked is False

    session = mock_uow.active_sessions.create.call_args.args[0]
    assert session.app_user_id == user.id
    assert session.ip_address == "10.0.0.5"
    assert session.expires_at > datetime.utcnow()

    assert user.login_attempts == 0
    assert user.last_login_ip == "10.0.0.5"
    mock_uow.app_users.record_failed_attempt.assert_not_called()
    assert logged_events(mock_uow) == ["user_login"]


@pytest.mark.asyncio
async def test_login_invalid_api_key(mock_uow):
    mock_uow.applications.get_by_api_key.return_value = None

    result = await LoginUseCase(mock_uow).execute(command(api_key="pa_unknown"), CLIENT)

    assert result.is_err()
    assert result.error.code == "INVALID_API_KEY"
    assert result.error.message == "Invalid or inactive API key"
    mock_uow.app_users.get_by_username.assert_not_called()
    mock_uow.activity_logs.create.assert_not_called()


@pytest.mark.asyncio
async def test_login_inactive_application(mock_uow):
    mock_uow.applications.get_by_api_key.return_value = make_application(is_active=False)

    result = await LoginUseCase(mock_uow).execute(command(), CLIENT)

    assert result.error.code == "INVALID_API_KEY"


@pytest.mark.asyncio
async def test_login_blocked_ip_checked_before_user(mock_uow):
    application = make_application()
    mock_uow.applications.get_by_api_key.return_value = application

    async def find_active_match(application_id, type, value):
        if type == BlacklistType.ip:
            return BlacklistEntry(type=BlacklistType.ip, value=value, reason="abuse")
        return None

    mock_uow.blacklist.find_active_match.side_effect = find_active_match

    result = await LoginUseCase(mock_uow).execute(command(), CLIENT)

    assert result.error.code == "BLACKLISTED"
    assert result.error.message == "Access denied: IP address is blacklisted"
    mock_uow.app_users.get_by_username.assert_not_called()
    assert logged_events(mock_uow) == ["login_blocked_ip"]


@pytest.mark.asyncio
async def test_login_unknown_user_runs_dummy_comparison(mock_uow):
    application = make_application(login_failed_message="Nope.")
    mock_uow.applications.get_by_api_key.return_value = application
    mock_uow.app_users.get_by_username.return_value = None

    with patch("primeauth.app.use_cases.auth.login_use_case.dummy_verify") as dummy:
        result = await LoginUseCase(mock_uow).execute(command(username="ghost"), CLIENT)

    assert result.error.code == "INVALID_CREDENTIALS"
    assert result.error.message == "Nope."
    dummy.assert_called_once_with(PASSWORD)
    assert logged_events(mock_uow) == ["login_failed"]


@pytest.mark.asyncio
async def test_login_wrong_password_counts_attempt_and_never_binds_hwid(mock_uow):
    application = make_application(hwid_lock_enabled=True)
    user = make_user(application, hwid=None)
    mock_uow.applications.get_by_api_key.return_value = application
    mock_uow.app_users.get_by_username.return_value = user

    result = await LoginUseCase(mock_uow).execute(
        command(password="wrong-password", hwid="HWID-A"), CLIENT
    )

    assert result.error.code == "INVALID_CREDENTIALS"
    assert result.error.message == application.login_failed_message
    assert user.hwid is None
    mock_uow.app_users.record_failed_attempt.assert_called_once()
    assert mock_uow.app_users.record_failed_attempt.call_args.args[0] == user.id
    mock_uow.app_users.update.assert_not_called()
    mock_uow.active_sessions.create.assert_not_called()


@pytest.mark.asyncio
async def test_login_unknown_user_and_wrong_password_look_the_same(mock_uow):
    application = make_application()
    mock_uow.applications.get_by_api_key.return_value = application
    mock_uow.app_users.get_by_username.return_value = None
    unknown = await LoginUseCase(mock_uow).execute(command(username="ghost"), CLIENT)

    mock_uow.app_users.get_by_username.return_value = make_user(application)
    wrong = await LoginUseCase(mock_uow).execute(command(password="wrong-password"), CLIENT)

    assert unknown.error == wrong.error


@pytest.mark.asyncio
async def test_login_paused_wins_over_expired(mock_uow):
    application = make_application()
    user = make_user(
        application, is_paused=True, expires_at=datetime.utcnow() - timedelta(days=1)
    )
    mock_uow.applications.get_by_api_key.return_value = application
    mock_uow.app_users.get_by_username.return_value = user

    result = await LoginUseCase(mock_uow).execute(command(password="wrong-password"), CLIENT)

    assert result.error.code == "ACCOUNT_PAUSED"
    assert result.error.message == application.account_paused_message
    mock_uow.app_users.record_failed_attempt.assert_not_called()
    assert logged_events(mock_uow) == ["account_paused"]


@pytest.mark.asyncio
async def test_login_disabled_account(mock_uow):
    application = make_application(account_disabled_message="Banned.")
    mock_uow.applications.get_by_api_key.return_value = application
    mock_uow.app_users.get_by_username.return_value = make_user(application, is_active=False)

    result = await LoginUseCase(mock_uow).execute(command(), CLIENT)

    assert result.error.code == "ACCOUNT_DISABLED"
    assert result.error.message == "Banned."


@pytest.mark.asyncio
async def test_login_expired_account(mock_uow):
    application = make_application()
    user = make_user(application, expires_at=datetime.utcnow() - timedelta(minutes=1))
    mock_uow.applications.get_by_api_key.return_value = application
    mock_uow.app_users.get_by_username.return_value = user

    result = await LoginUseCase(mock_uow).execute(command(), CLIENT)

    assert result.error.code == "ACCOUNT_EXPIRED"
    assert logged_events(mock_uow) == ["account_expired"]


@pytest.mark.asyncio
async def test_login_version_mismatch(mock_uow):
    application = make_application(version="2.0.0")
    mock_uow.applications.get_by_api_key.return_value = application
    mock_uow.app_users.get_by_username.return_value = make_user(application)

    result = await LoginUseCase(mock_uow).execute(command(version="1.9.0"), CLIENT)

    assert result.error.code == "VERSION_MISMATCH"
    assert result.error.message == application.version_mismatch_message
    log = mock_uow.activity_logs.create.call_args.args[0]
    assert log.event == "version_mismatch"
    assert log.event_metadata["client_version"] == "1.9.0"
    assert log.event_metadata["required_version"] == "2.0.0"


@pytest.mark.asyncio
async def test_login_without_version_skips_version_check(mock_uow):
    application = make_application(version="2.0.0")
    mock_uow.applications.get_by_api_key.return_value = application
    mock_uow.app_users.get_by_username.return_value = make_user(application)

    result = await LoginUseCase(mock_uow).execute(command(version=None), CLIENT)

    assert result.is_ok()


@pytest.mark.asyncio
async def test_login_binds_hwid_on_first_success(mock_uow):
    application = make_application(hwid_lock_enabled=True)
    user = make_user(application, hwid=None)
    mock_uow.applications.get_by_api_key.return_value = application
    mock_uow.app_users.get_by_username.return_value = user

    result = await LoginUseCase(mock_uow).execute(command(hwid="HWID-A"), CLIENT)

    assert result.is_ok()
    assert result.value.hwid_locked is True
    assert user.hwid == "HWID-A"
    log = mock_uow.activity_logs.create.call_args.args[0]
    assert log.event_metadata["hwid_bound"] is True


@pytest.mark.asyncio
async def test_login_hwid_mismatch(mock_uow):
    application = make_application(hwid_lock_enabled=True)
    user = make_user(application, hwid="HWID-A")
    mock_uow.applications.get_by_api_key.return_value = application
    mock_uow.app_users.get_by_username.return_value = user

    result = await LoginUseCase(mock_uow).execute(command(hwid="HWID-B"), CLIENT)

    assert result.error.code == "HWID_MISMATCH"
    assert result.error.message == application.hwid_mismatch_message
    assert user.hwid == "HWID-A"
    mock_uow.active_sessions.create.assert_not_called()


@pytest.mark.asyncio
async def test_login_hwid_required(mock_uow):
    application = make_application(hwid_lock_enabled=True)
    mock_uow.applications.get_by_api_key.return_value = application
    mock_uow.app_users.get_by_username.return_value = make_user(application)

    result = await LoginUseCase(mock_uow).execute(command(hwid=None), CLIENT)

    assert result.error.code == "HWID_REQUIRED"
    assert result.error.message == "Hardware ID is required for this application"


@pytest.mark.asyncio
async def test_login_store_error_is_service_unavailable(mock_uow):
    mock_uow.applications.get_by_api_key.side_effect = OperationalError(
        "SELECT", {}, Exception("database is locked")
    )

    result = await LoginUseCase(mock_uow).execute(command(), CLIENT)

    assert result.error.code == "SERVICE_UNAVAILABLE"
    assert result.error.message == "Service temporarily unavailable"


@pytest.mark.asyncio
async def test_login_store_timeout_is_service_unavailable(mock_uow, monkeypatch):
    monkeypatch.setattr(ApplicationConfig, "STORE_TIMEOUT_SECONDS", 0.05)

    async def slow_lookup(api_key):
        await asyncio.sleep(1)

    mock_uow.applications.get_by_api_key.side_effect = slow_lookup

    result = await LoginUseCase(mock_uow).execute(command(), CLIENT)

    assert result.error.code == "SERVICE_UNAVAILABLE"
