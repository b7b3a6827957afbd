"""
Webhook delivery over httpx.

Deliveries run as background tasks; a failed delivery is logged and dropped.
"""

import asyncio
import hashlib
import hmac
import json
import logging
import random
from typing import Any, Dict, List, Optional, Set

import httpx

from config import ApplicationConfig
from primeauth.app.services.webhook_notifier import WebhookNotifier
from primeauth.domain.entities import Webhook

logger = logging.getLogger(__name__)

USER_AGENT = "PrimeAuth-Webhook/1.0"


def build_signature(secret: str, body: bytes) -> str:
    """Hex HMAC-SHA256 of the raw request body"""
    return hmac.new(secret.encode("utf-8"), body, hashlib.sha256).hexdigest()


def build_headers(webhook: Webhook, payload: Dict[str, Any], body: bytes) -> Dict[str, str]:
    headers = {
        "Content-Type": "application/json",
        "User-Agent": USER_AGENT,
        "X-Webhook-Event": payload["event"],
        "X-Webhook-Timestamp": payload["timestamp"],
    }
    if webhook.secret:
        headers["X-Webhook-Signature"] = f"sha256={build_signature(webhook.secret, body)}"
    return headers


class HttpxWebhookNotifier(WebhookNotifier):
    """
    Posts JSON payloads to webhook URLs.

    Network errors and 5xx responses are retried up to max_retries times,
    sleeping backoff * 2**n seconds (jittered) between attempts; 4xx
    responses are not retried.
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
        backoff: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.timeout = timeout if timeout is not None else ApplicationConfig.WEBHOOK_TIMEOUT_SECONDS
        self.max_retries = max_retries if max_retries is not None else ApplicationConfig.WEBHOOK_MAX_RETRIES
        self.backoff = backoff if backoff is not None else ApplicationConfig.WEBHOOK_BACKOFF_SECONDS
        self.transport = transport
        self._tasks: Set[asyncio.Task] = set()

    def notify(self, webhooks: List[Webhook], payload: Dict[str, Any]) -> None:
        for webhook in webhooks:
            # Detach from the ORM row; the task outlives the request session
            target = Webhook(
                id=webhook.id,
                account_id=webhook.account_id,
                url=webhook.url,
                secret=webhook.secret,
                events=list(webhook.events or []),
            )
            task = asyncio.create_task(self.deliver(target, payload))
            self._tasks.add(task)
            task.add_done_callback(self._tasks.discard)

    async def deliver(self, webhook: Webhook, payload: Dict[str, Any]) -> bool:
        """Send one payload; returns True on a 2xx/3xx response"""
        body = json.dumps(payload, separators=(",", ":"), default=str).encode("utf-8")
        headers = build_headers(webhook, payload, body)

        for attempt in range(self.max_retries + 1):
            if attempt:
                await asyncio.sleep(self.retry_delay(attempt))
            try:
                async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                    response = await client.post(webhook.url, content=body, headers=headers)
            except httpx.HTTPError as exc:
                logger.warning(
                    "Webhook delivery failed webhook_id=%s event=%s attempt=%d: %s",
                    webhook.id,
                    payload["event"],
                    attempt + 1,
                    exc.__class__.__name__,
                )
                continue

            if response.status_code < 400:
                logger.debug("Webhook delivered webhook_id=%s event=%s", webhook.id, payload["event"])
                return True

            logger.warning(
                "Webhook rejected webhook_id=%s event=%s status=%d attempt=%d",
                webhook.id,
                payload["event"],
                response.status_code,
                attempt + 1,
            )
            if response.status_code < 500:
                return False

        return False

    def retry_delay(self, attempt: int) -> float:
        jitter = random.uniform(0.5, 1.5)
        return self.backoff * (2 ** (attempt - 1)) * jitter

    async def drain(self) -> None:
        """Wait for in-flight deliveries (shutdown and tests)"""
        if self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)
