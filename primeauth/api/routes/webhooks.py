from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from primeauth.api.utils.errors import raise_console_error
from primeauth.app.services.unit_of_work import UnitOfWork
from primeauth.app.use_cases.webhooks import (
    CreateWebhookCommand,
    CreateWebhookUseCase,
    DeleteWebhookUseCase,
    ListWebhooksUseCase,
    WebhookInfo,
)
from primeauth.depends import get_current_account, get_unit_of_work

router = APIRouter(prefix="/webhooks", tags=["Webhooks"])


class CreateWebhookRequest(BaseModel):
    url: str = Field(..., min_length=1, max_length=2048)
    secret: Optional[str] = Field(None, max_length=255)
    events: List[str] = Field(default_factory=list, description="Empty subscribes to all events")


class DeleteWebhookResponse(BaseModel):
    webhook_id: str
    deleted: bool


@router.post("", status_code=status.HTTP_201_CREATED, response_model=WebhookInfo)
async def create_webhook(
    request: CreateWebhookRequest,
    account_id: UUID = Depends(get_current_account),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Webhook

    Raises:
        - 400 Bad Request: INVALID_WEBHOOK_URL
    """
    command = CreateWebhookCommand(**request.model_dump())
    result = await CreateWebhookUseCase(uow).execute(account_id, command)

    if result.is_err():
        raise_console_error(result.error)

    return result.value


@router.get("", status_code=status.HTTP_200_OK, response_model=List[WebhookInfo])
async def list_webhooks(
    account_id: UUID = Depends(get_current_account),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListWebhooksUseCase(uow).execute(account_id)

    if result.is_err():
        raise_console_error(result.error)

    return result.value


@router.delete("/{webhook_id}", status_code=status.HTTP_200_OK, response_model=DeleteWebhookResponse)
async def delete_webhook(
    webhook_id: UUID,
    account_id: UUID = Depends(get_current_account),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Webhook

    Raises:
        - 404 Not Found: WEBHOOK_NOT_FOUND
    """
    result = await DeleteWebhookUseCase(uow).execute(account_id, webhook_id)

    if result.is_err():
        raise_console_error(result.error)

    return result.value
