from unittest.mock import MagicMock
from uuid import uuid4

import pytest
from sqlalchemy.exc import OperationalError

from primeauth.app.services.activity_recorder import ActivityRecorder, sanitize_metadata
from primeauth.domain.entities import Webhook


def test_sanitize_metadata_redacts_nested_sensitive_keys():
    metadata = {
        "username": "alice",
        "password": "hunter2",
        "nested": {"session_token": "abc", "clientSecret": "s", "count": 2},
        "items": [{"api_token": "x"}, "plain"],
    }

    assert sanitize_metadata(metadata) == {
        "username": "alice",
        "password": "[REDACTED]",
        "nested": {"session_token": "[REDACTED]", "clientSecret": "[REDACTED]", "count": 2},
        "items": [{"api_token": "[REDACTED]"}, "plain"],
    }


@pytest.mark.asyncio
async def test_record_commits_pending_writes_before_append(mock_uow):
    calls = []
    mock_uow.commit.side_effect = lambda: calls.append("commit")

    async def create(entry):
        calls.append("append")
        return entry

    mock_uow.activity_logs.create.side_effect = create

    entry = await ActivityRecorder(mock_uow).record(
        event="login_failed",
        success=False,
        application_id=uuid4(),
        metadata={"username": "alice", "password": "hunter2"},
        error_message="Invalid credentials!",
    )

    assert calls == ["commit", "append", "commit"]
    assert entry.event == "login_failed"
    assert entry.success is False
    assert entry.event_metadata == {"username": "alice", "password": "[REDACTED]"}


@pytest.mark.asyncio
async def test_record_failure_is_swallowed(mock_uow):
    mock_uow.activity_logs.create.side_effect = OperationalError("INSERT", {}, Exception("disk full"))

    entry = await ActivityRecorder(mock_uow).record(event="user_login", success=True)

    assert entry is None
    mock_uow.rollback.assert_called_once()


@pytest.mark.asyncio
async def test_record_notifies_subscribed_webhooks(mock_uow):
    account_id = uuid4()
    application_id = uuid4()
    all_events = Webhook(account_id=account_id, url="https://hooks.example.com/a", events=[])
    logins_only = Webhook(account_id=account_id, url="https://hooks.example.com/b", events=["user_login"])
    registers_only = Webhook(
        account_id=account_id, url="https://hooks.example.com/c", events=["user_register"]
    )
    mock_uow.webhooks.list_active_by_account_id.return_value = [all_events, logins_only, registers_only]
    notifier = MagicMock()

    await ActivityRecorder(mock_uow, notifier).record(
        event="user_login",
        success=True,
        application_id=application_id,
        metadata={"session_token": "abc"},
        account_id=account_id,
        user_data={"id": "u1", "username": "alice"},
    )

    notifier.notify.assert_called_once()
    webhooks, payload = notifier.notify.call_args.args
    assert webhooks == [all_events, logins_only]
    assert payload["event"] == "user_login"
    assert payload["application_id"] == str(application_id)
    assert payload["success"] is True
    assert payload["timestamp"].endswith("Z")
    assert payload["metadata"] == {"session_token": "[REDACTED]"}
    assert payload["user_data"] == {"id": "u1", "username": "alice"}


@pytest.mark.asyncio
async def test_record_without_account_skips_webhooks(mock_uow):
    notifier = MagicMock()

    await ActivityRecorder(mock_uow, notifier).record(event="user_login", success=True)

    mock_uow.webhooks.list_active_by_account_id.assert_not_called()
    notifier.notify.assert_not_called()
