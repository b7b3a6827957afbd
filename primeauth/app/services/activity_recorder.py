"""
Activity Recorder

Best-effort, append-only event log for authentication-relevant actions.
A failed append is logged and rolled back; it never fails the caller.
"""

import logging
from datetime import datetime
from typing import Any, Dict, Optional
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from primeauth.app.services.unit_of_work import UnitOfWork
from primeauth.app.services.webhook_notifier import WebhookNotifier
from primeauth.domain.entities import ActivityLog

logger = logging.getLogger(__name__)

_SENSITIVE_KEY_PATTERNS = ("password", "secret", "token")
_REDACTED_VALUE = "[REDACTED]"


def sanitize_metadata(value: Any) -> Any:
    """Recursively replace values under sensitive keys"""
    if isinstance(value, dict):
        sanitized: Dict[str, Any] = {}
        for raw_key, raw_value in value.items():
            key = str(raw_key)
            if any(pattern in key.lower() for pattern in _SENSITIVE_KEY_PATTERNS):
                sanitized[key] = _REDACTED_VALUE
            else:
                sanitized[key] = sanitize_metadata(raw_value)
        return sanitized
    if isinstance(value, list):
        return [sanitize_metadata(item) for item in value]
    return value


class ActivityRecorder:
    def __init__(self, uow: UnitOfWork, notifier: Optional[WebhookNotifier] = None):
        self.uow = uow
        self.notifier = notifier

    async def record(
        self,
        event: str,
        success: bool,
        application_id: Optional[UUID] = None,
        app_user_id: Optional[UUID] = None,
        metadata: Optional[Dict[str, Any]] = None,
        error_message: Optional[str] = None,
        ip_address: Optional[str] = None,
        hwid: Optional[str] = None,
        user_agent: Optional[str] = None,
        account_id: Optional[UUID] = None,
        user_data: Optional[Dict[str, Any]] = None,
    ) -> Optional[ActivityLog]:
        """
        Append one activity log entry.

        Pending writes of the calling operation are committed first so a
        failed append can never undo them. Errors from that commit belong to
        the caller and propagate; errors from the append itself are swallowed.

        Args:
            account_id: Owning account; when given, its subscribed webhooks
                are notified after the append
            user_data: Extra user fields for the webhook payload only

        Returns:
            The stored entry, or None when the append failed
        """
        await self.uow.commit()

        sanitized = sanitize_metadata(metadata) if metadata else None
        entry = ActivityLog(
            application_id=application_id,
            app_user_id=app_user_id,
            event=event,
            ip_address=ip_address,
            hwid=hwid,
            user_agent=user_agent,
            event_metadata=sanitized,
            success=success,
            error_message=error_message,
            created_at=datetime.utcnow(),
        )

        try:
            entry = await self.uow.activity_logs.create(entry)
            await self.uow.commit()
        except SQLAlchemyError as exc:
            logger.warning(
                "Failed to record activity event=%s application_id=%s: %s",
                event,
                application_id,
                exc.__class__.__name__,
            )
            await self.uow.rollback()
            return None

        if self.notifier is not None and account_id is not None:
            await self._notify(entry, account_id, user_data)

        return entry

    async def _notify(
        self, entry: ActivityLog, account_id: UUID, user_data: Optional[Dict[str, Any]]
    ) -> None:
        try:
            webhooks = await self.uow.webhooks.list_active_by_account_id(account_id)
        except SQLAlchemyError as exc:
            logger.warning(
                "Failed to load webhooks for account_id=%s: %s",
                account_id,
                exc.__class__.__name__,
            )
            return

        subscribed = [w for w in webhooks if w.subscribes_to(entry.event)]
        if not subscribed:
            return

        payload: Dict[str, Any] = {
            "event": entry.event,
            "timestamp": entry.created_at.isoformat() + "Z",
            "application_id": str(entry.application_id) if entry.application_id else None,
            "success": entry.success,
            "error_message": entry.error_message,
            "metadata": entry.event_metadata,
        }
        if user_data:
            payload["user_data"] = user_data

        self.notifier.notify(subscribed, payload)
