"""
Account Entity

A platform owner who signs in to the owner console and creates applications.
"""

from datetime import datetime
from typing import List
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, SQLModel

from .enums import AccountRole


class Account(SQLModel, table=True):
    """
    Account entity - authentication platform owner.

    Business Rules:
    - Email is unique across all accounts
    - Created on first sign-in, never hard-deleted (is_active=False instead)
    - role=owner implies every permission
    """

    __tablename__ = "accounts"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)

    role: AccountRole = Field(default=AccountRole.user)
    permissions: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    is_active: bool = Field(default=True)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
