"""Core configuration, errors, security and storage."""

from commodities.core.config import Settings, get_settings
from commodities.core.storage import MemoryStorage, PersistenceAdapter, SqlStorage, build_storage

__all__ = [
    "MemoryStorage",
    "PersistenceAdapter",
    "Settings",
    "SqlStorage",
    "build_storage",
    "get_settings",
]
