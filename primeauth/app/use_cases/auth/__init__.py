"""
Authentication Use Cases

End-user register, login, verify and logout flows.
"""

from .register_use_case import RegisterUseCase
from .login_use_case import LoginUseCase
from .verify_session_use_case import VerifySessionUseCase
from .logout_use_case import LogoutUseCase
from .dtos import (
    ClientInfo,
    RegisterCommand,
    LoginCommand,
    RegisterResponse,
    LoginResponse,
    VerifyResponse,
    LogoutResponse,
)

__all__ = [
    # Use Cases
    "RegisterUseCase",
    "LoginUseCase",
    "VerifySessionUseCase",
    "LogoutUseCase",
    # DTOs - Commands
    "ClientInfo",
    "RegisterCommand",
    "LoginCommand",
    # DTOs - Responses
    "RegisterResponse",
    "LoginResponse",
    "VerifyResponse",
    "LogoutResponse",
]
