"""
Activity Use Cases
"""

from .get_application_activity_use_case import GetApplicationActivityUseCase
from .get_app_user_activity_use_case import GetAppUserActivityUseCase
from .dtos import ActivityLogInfo, ActivityPage

__all__ = [
    "GetApplicationActivityUseCase",
    "GetAppUserActivityUseCase",
    "ActivityLogInfo",
    "ActivityPage",
]
