"""
Account Use Cases

Platform account provisioning and administration.
"""

from .sign_in_account_use_case import SignInAccountUseCase
from .update_account_use_case import UpdateAccountUseCase
from .dtos import AccountInfo, SignInResponse, UpdateAccountCommand

__all__ = [
    "SignInAccountUseCase",
    "UpdateAccountUseCase",
    "AccountInfo",
    "SignInResponse",
    "UpdateAccountCommand",
]
