"""
License Key Use Cases
"""

from .create_license_keys_use_case import CreateLicenseKeysUseCase, generate_license_key
from .list_license_keys_use_case import ListLicenseKeysUseCase
from .deactivate_license_key_use_case import DeactivateLicenseKeyUseCase
from .dtos import MAX_BULK_LICENSES, CreateLicenseKeysCommand, LicenseKeyInfo

__all__ = [
    "CreateLicenseKeysUseCase",
    "ListLicenseKeysUseCase",
    "DeactivateLicenseKeyUseCase",
    "CreateLicenseKeysCommand",
    "LicenseKeyInfo",
    "MAX_BULK_LICENSES",
    "generate_license_key",
]
