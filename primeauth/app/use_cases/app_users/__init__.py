"""
App User Use Cases

Owner console management of end-user accounts.
"""

from .create_app_user_use_case import CreateAppUserUseCase
from .list_app_users_use_case import ListAppUsersUseCase
from .manage_app_user_use_case import ManageAppUserUseCase
from .delete_app_user_use_case import DeleteAppUserUseCase
from .dtos import AppUserInfo, CreateAppUserCommand

__all__ = [
    "CreateAppUserUseCase",
    "ListAppUsersUseCase",
    "ManageAppUserUseCase",
    "DeleteAppUserUseCase",
    "AppUserInfo",
    "CreateAppUserCommand",
]
