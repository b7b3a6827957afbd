"""
PrimeAuth Domain Enums

All enumeration types used across domain entities and use cases.
"""

from enum import Enum


class AccountRole(str, Enum):
    """Platform account role, lowest to highest privilege"""

    user = "user"
    moderator = "moderator"
    admin = "admin"
    owner = "owner"


class Permission(str, Enum):
    """Fine-grained owner console permissions"""

    edit_code = "edit_code"
    manage_users = "manage_users"
    manage_applications = "manage_applications"
    view_all_data = "view_all_data"
    delete_applications = "delete_applications"
    manage_permissions = "manage_permissions"
    access_admin_panel = "access_admin_panel"


class BlacklistType(str, Enum):
    """Identity attribute a blacklist entry matches on"""

    ip = "ip"
    username = "username"
    email = "email"
    hwid = "hwid"


class AuthFailure(str, Enum):
    """Every way an end-user authentication call can fail"""

    INVALID_API_KEY = "INVALID_API_KEY"
    BLACKLISTED = "BLACKLISTED"
    INVALID_LICENSE = "INVALID_LICENSE"
    LICENSE_EXPIRED = "LICENSE_EXPIRED"
    LICENSE_FULL = "LICENSE_FULL"
    DUPLICATE_USER = "DUPLICATE_USER"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    ACCOUNT_DISABLED = "ACCOUNT_DISABLED"
    ACCOUNT_PAUSED = "ACCOUNT_PAUSED"
    ACCOUNT_EXPIRED = "ACCOUNT_EXPIRED"
    VERSION_MISMATCH = "VERSION_MISMATCH"
    HWID_REQUIRED = "HWID_REQUIRED"
    HWID_MISMATCH = "HWID_MISMATCH"
    INVALID_SESSION = "INVALID_SESSION"
    SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"
