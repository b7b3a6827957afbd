"""
Blacklist Use Cases
"""

from .add_blacklist_entry_use_case import AddBlacklistEntryUseCase
from .list_blacklist_entries_use_case import ListBlacklistEntriesUseCase
from .remove_blacklist_entry_use_case import RemoveBlacklistEntryUseCase
from .dtos import AddBlacklistEntryCommand, BlacklistEntryInfo

__all__ = [
    "AddBlacklistEntryUseCase",
    "ListBlacklistEntriesUseCase",
    "RemoveBlacklistEntryUseCase",
    "AddBlacklistEntryCommand",
    "BlacklistEntryInfo",
]
