"""
Shared plumbing for the end-user auth flows.

Every flow runs under a store timeout, resolves the calling application
from its API key, and reports failures through the Activity Recorder.
"""

import asyncio
import logging
from typing import Any, Awaitable, Dict, Optional
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from config import ApplicationConfig
from libs.result import Error, Result, Return
from primeauth.app.services.activity_recorder import ActivityRecorder
from primeauth.app.services.unit_of_work import UnitOfWork
from primeauth.app.services.webhook_notifier import WebhookNotifier
from primeauth.domain.entities import Application, AuthFailure

from .dtos import ClientInfo

logger = logging.getLogger(__name__)

INVALID_API_KEY_MESSAGE = "Invalid or inactive API key"
SERVICE_UNAVAILABLE_MESSAGE = "Service temporarily unavailable"


def fail(failure: AuthFailure, message: str) -> Result[Any]:
    return Return.err(Error(failure.value, message))


class AuthFlowUseCase:
    """Base class for register/login/verify/logout"""

    operation = "auth"

    def __init__(self, uow: UnitOfWork, notifier: Optional[WebhookNotifier] = None):
        self.uow = uow
        self.notifier = notifier
        self.recorder = ActivityRecorder(uow, notifier)

    async def _guarded(self, operation: Awaitable[Result[Any]]) -> Result[Any]:
        """
        Bound the whole flow by STORE_TIMEOUT_SECONDS.

        Timeouts and database errors become SERVICE_UNAVAILABLE; side effects
        already committed stay committed.
        """
        try:
            return await asyncio.wait_for(
                operation, timeout=ApplicationConfig.STORE_TIMEOUT_SECONDS
            )
        except asyncio.TimeoutError:
            logger.error("%s timed out after %ss", self.operation, ApplicationConfig.STORE_TIMEOUT_SECONDS)
            return fail(AuthFailure.SERVICE_UNAVAILABLE, SERVICE_UNAVAILABLE_MESSAGE)
        except SQLAlchemyError as exc:
            logger.error("%s failed on store error: %s", self.operation, exc.__class__.__name__)
            return fail(AuthFailure.SERVICE_UNAVAILABLE, SERVICE_UNAVAILABLE_MESSAGE)

    async def _resolve_application(self, api_key: str) -> Optional[Application]:
        """Active application owning the API key, else None"""
        if not api_key:
            return None
        application = await self.uow.applications.get_by_api_key(api_key)
        if application is None or not application.is_active:
            return None
        return application

    async def _record(
        self,
        event: str,
        success: bool,
        application_id: UUID,
        account_id: UUID,
        client: ClientInfo,
        app_user_id: Optional[UUID] = None,
        hwid: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
        error_message: Optional[str] = None,
        user_data: Optional[Dict[str, Any]] = None,
    ) -> None:
        await self.recorder.record(
            event=event,
            success=success,
            application_id=application_id,
            app_user_id=app_user_id,
            metadata=metadata,
            error_message=error_message,
            ip_address=client.ip_address,
            hwid=hwid,
            user_agent=client.user_agent,
            account_id=account_id,
            user_data=user_data,
        )
