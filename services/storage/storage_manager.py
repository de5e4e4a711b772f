"""
Storage Manager - Selects the blob store backend and normalizes its failures.
Low-level OSErrors surface as StorageIOError so callers handle one type.
"""

from __future__ import annotations
import logging
from typing import Optional, Union

from ..config import Settings, load_settings
from ..errors import StorageIOError
from .local_storage import LocalStorage
from .memory_storage import MemoryStorage

log = logging.getLogger("recipes.storage")

Backend = Union[LocalStorage, MemoryStorage]


class StorageManager:
    """Wraps a blob store backend with error conversion."""
    
    def __init__(self, backend: Optional[Backend] = None, settings: Optional[Settings] = None):
        """
        Initialize storage manager.
        
        Args:
            backend: Explicit backend. If None, one is built from settings.
            settings: Settings to build the backend from. If None, loaded from env.
        """
        if backend is None:
            settings = settings or load_settings()
            backend = self._build_backend(settings)
        self.backend = backend
    
    @staticmethod
    def _build_backend(settings: Settings) -> Backend:
        """Create the backend named in settings."""
        if settings.storage_backend == "memory":
            log.info("Using in-memory storage; recipes will not survive a restart")
            return MemoryStorage()
        log.info("Using local storage at %s", settings.data_dir)
        return LocalStorage(settings.data_dir)
    
    def get(self, key: str) -> Optional[str]:
        """
        Read key from the backend.
        
        Raises:
            StorageIOError: If the backend read fails
        """
        try:
            return self.backend.get(key)
        except OSError as e:
            log.error("Storage read failed for %r: %s", key, e)
            raise StorageIOError(f"Falha ao ler dados salvos: {e}") from e
    
    def set(self, key: str, value: str) -> None:
        """
        Write key to the backend.
        
        Raises:
            StorageIOError: If the backend write fails
        """
        try:
            self.backend.set(key, value)
        except OSError as e:
            log.error("Storage write failed for %r: %s", key, e)
            raise StorageIOError(f"Falha ao salvar dados: {e}") from e
    
    def get_mtime(self, key: str) -> str:
        """Get last modification time of key."""
        try:
            return self.backend.get_mtime(key)
        except OSError:
            return "(unknown)"
