"""
Session Use Cases
"""

from .list_active_sessions_use_case import ListActiveSessionsUseCase
from .end_session_use_case import EndSessionUseCase
from .sweep_sessions_use_case import SweepSessionsUseCase
from .dtos import ActiveSessionInfo

__all__ = [
    "ListActiveSessionsUseCase",
    "EndSessionUseCase",
    "SweepSessionsUseCase",
    "ActiveSessionInfo",
]
