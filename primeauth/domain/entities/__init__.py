"""
PrimeAuth Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    AccountRole,
    AuthFailure,
    BlacklistType,
    Permission,
)

# Export all entities
from .account import Account
from .application import Application, generate_api_key
from .license_key import LicenseKey
from .app_user import AppUser
from .blacklist_entry import BlacklistEntry
from .activity_log import ActivityLog
from .active_session import ActiveSession
from .webhook import Webhook

__all__ = [
    # Enums
    "AccountRole",
    "AuthFailure",
    "BlacklistType",
    "Permission",
    # Entities
    "Account",
    "Application",
    "LicenseKey",
    "AppUser",
    "BlacklistEntry",
    "ActivityLog",
    "ActiveSession",
    "Webhook",
    # Helpers
    "generate_api_key",
]
