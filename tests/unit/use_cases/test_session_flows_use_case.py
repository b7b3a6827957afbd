from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from primeauth.app.use_cases.auth import LogoutUseCase, VerifySessionUseCase
from primeauth.domain.entities import ActiveSession, Application


@pytest.fixture
def application():
    return Application(account_id=uuid4(), name="Prime Tool", api_key="pa_test_key")


def make_session(application, **overrides):
    now = datetime.utcnow()
    fields = dict(
        application_id=application.id,
        app_user_id=uuid4(),
        session_token="token-123",
        created_at=now,
        last_activity_at=now,
        expires_at=now + timedelta(hours=24),
    )
    fields.update(overrides)
    return ActiveSession(**fields)


# ============================================================================
# Verify
# ============================================================================


@pytest.mark.asyncio
async def test_verify_valid_session_refreshes_activity(mock_uow, application):
    session = make_session(application)
    mock_uow.applications.get_by_api_key.return_value = application
    mock_uow.active_sessions.get_by_token.return_value = session

    result = await VerifySessionUseCase(mock_uow).execute("pa_test_key", "token-123")

    assert result.is_ok()
    assert result.value.message == "Session is valid"
    assert result.value.user_id == str(session.app_user_id)
    mock_uow.active_sessions.touch.assert_called_once()
    assert mock_uow.active_sessions.touch.call_args.args[0] == "token-123"
    mock_uow.commit.assert_called()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "overrides",
    [
        {"is_active": False},
        {"expires_at": datetime.utcnow() - timedelta(seconds=1)},
        {"application_id": uuid4()},
    ],
    ids=["ended", "expired", "other-application"],
)
async def test_verify_rejects_unusable_session(mock_uow, application, overrides):
    mock_uow.applications.get_by_api_key.return_value = application
    mock_uow.active_sessions.get_by_token.return_value = make_session(application, **overrides)

    result = await VerifySessionUseCase(mock_uow).execute("pa_test_key", "token-123")

    assert result.error.code == "INVALID_SESSION"
    assert result.error.message == "Invalid or expired session"
    mock_uow.active_sessions.touch.assert_not_called()


@pytest.mark.asyncio
async def test_verify_unknown_token(mock_uow, application):
    mock_uow.applications.get_by_api_key.return_value = application

    result = await VerifySessionUseCase(mock_uow).execute("pa_test_key", "nope")

    assert result.error.code == "INVALID_SESSION"


@pytest.mark.asyncio
async def test_verify_invalid_api_key(mock_uow):
    mock_uow.applications.get_by_api_key.return_value = None

    result = await VerifySessionUseCase(mock_uow).execute("pa_unknown", "token-123")

    assert result.error.code == "INVALID_API_KEY"
    mock_uow.active_sessions.get_by_token.assert_not_called()


# ============================================================================
# Logout
# ============================================================================


@pytest.mark.asyncio
async def test_logout_ends_session_and_records_event(mock_uow, application):
    session = make_session(application)
    mock_uow.applications.get_by_api_key.return_value = application
    mock_uow.active_sessions.get_by_token.return_value = session
    mock_uow.active_sessions.end_by_token.return_value = True

    result = await LogoutUseCase(mock_uow).execute("pa_test_key", "token-123")

    assert result.is_ok()
    assert result.value.message == "Logged out successfully"
    mock_uow.active_sessions.end_by_token.assert_called_once_with("token-123", application.id)
    log = mock_uow.activity_logs.create.call_args.args[0]
    assert log.event == "session_end"
    assert log.app_user_id == session.app_user_id


@pytest.mark.asyncio
async def test_logout_already_ended_session_still_succeeds(mock_uow, application):
    mock_uow.applications.get_by_api_key.return_value = application
    mock_uow.active_sessions.end_by_token.return_value = False

    result = await LogoutUseCase(mock_uow).execute("pa_test_key", "token-123")

    assert result.is_ok()
    assert result.value.message == "Logged out successfully"
    mock_uow.activity_logs.create.assert_not_called()


@pytest.mark.asyncio
async def test_logout_unknown_api_key_succeeds(mock_uow):
    mock_uow.applications.get_by_api_key.return_value = None

    result = await LogoutUseCase(mock_uow).execute("pa_unknown", "token-123")

    assert result.is_ok()
    mock_uow.active_sessions.end_by_token.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "api_key, session_token",
    [(None, "token-123"), ("", "token-123"), ("pa_test_key", None), ("pa_test_key", "")],
    ids=["no-key", "empty-key", "no-token", "empty-token"],
)
async def test_logout_without_key_or_token_succeeds(mock_uow, api_key, session_token):
    result = await LogoutUseCase(mock_uow).execute(api_key, session_token)

    assert result.is_ok()
    assert result.value.message == "Logged out successfully"
    mock_uow.applications.get_by_api_key.assert_not_called()
    mock_uow.active_sessions.end_by_token.assert_not_called()
