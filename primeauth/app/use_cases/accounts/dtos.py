"""
Account Use Case DTOs
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from primeauth.domain.entities import AccountRole


class UpdateAccountCommand(BaseModel):
    role: Optional[AccountRole] = None
    permissions: Optional[List[str]] = None
    is_active: Optional[bool] = None


class AccountInfo(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    email: str
    role: AccountRole
    permissions: List[str]
    is_active: bool
    created_at: datetime
    updated_at: datetime


class SignInResponse(BaseModel):
    """Console session for the signed-in account"""

    account: AccountInfo
    access_token: str
    token_type: str = "bearer"
    created: bool
