"""Storage layer for recipe persistence."""

from .local_storage import LocalStorage
from .memory_storage import MemoryStorage
from .storage_manager import StorageManager

__all__ = ["LocalStorage", "MemoryStorage", "StorageManager"]
