"""
Application Use Cases

Owner console management of applications.
"""

from .create_application_use_case import CreateApplicationUseCase
from .list_applications_use_case import ListApplicationsUseCase
from .get_application_use_case import GetApplicationUseCase
from .update_application_use_case import UpdateApplicationUseCase
from .rotate_api_key_use_case import RotateApiKeyUseCase
from .get_application_stats_use_case import GetApplicationStatsUseCase
from .dtos import (
    ApplicationInfo,
    ApplicationStats,
    CreateApplicationCommand,
    UpdateApplicationCommand,
)

__all__ = [
    "CreateApplicationUseCase",
    "ListApplicationsUseCase",
    "GetApplicationUseCase",
    "UpdateApplicationUseCase",
    "RotateApiKeyUseCase",
    "GetApplicationStatsUseCase",
    "ApplicationInfo",
    "ApplicationStats",
    "CreateApplicationCommand",
    "UpdateApplicationCommand",
]
