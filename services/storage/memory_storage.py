"""In-memory storage, used for ephemeral sessions and tests."""

from __future__ import annotations
from typing import Dict, Optional


class MemoryStorage:
    """Dict-backed blob store with the same surface as LocalStorage."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def get_mtime(self, key: str) -> str:
        return "(in memory)" if key in self._data else "(not created yet)"
