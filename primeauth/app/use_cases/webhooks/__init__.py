"""
Webhook Use Cases
"""

from .create_webhook_use_case import CreateWebhookUseCase
from .list_webhooks_use_case import ListWebhooksUseCase
from .delete_webhook_use_case import DeleteWebhookUseCase
from .dtos import CreateWebhookCommand, WebhookInfo

__all__ = [
    "CreateWebhookUseCase",
    "ListWebhooksUseCase",
    "DeleteWebhookUseCase",
    "CreateWebhookCommand",
    "WebhookInfo",
]
