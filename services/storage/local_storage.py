"""
Local file storage implementation.
Each key is kept as one UTF-8 file inside a data directory.
"""

from __future__ import annotations
import logging
import os
import re
from pathlib import Path
from typing import Optional


log = logging.getLogger("recipes.storage.local")

_KEY_RE = re.compile(r"^[A-Za-z0-9_.-]+$")


class LocalStorage:
    """String-keyed blob store on the local filesystem."""
    
    def __init__(self, data_dir: Path):
        """
        Initialize local storage.
        
        Args:
            data_dir: Directory holding one file per key
        """
        self.data_dir = Path(data_dir)
    
    def path_for(self, key: str) -> Path:
        """Map a key to its file path."""
        if not _KEY_RE.match(key or "") or key.startswith("."):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self.data_dir / f"{key}.json"
    
    def get(self, key: str) -> Optional[str]:
        """
        Read the value stored under key.
        
        Returns:
            Stored string, or None if the key was never written
            
        Raises:
            OSError: If the file exists but cannot be read
        """
        path = self.path_for(key)
        if not path.exists():
            return None
        with path.open("r", encoding="utf-8") as f:
            return f.read()
    
    def set(self, key: str, value: str) -> None:
        """
        Store value under key with atomic write.
        
        Raises:
            OSError: If write fails
        """
        path = self.path_for(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        
        # Write to temp file first, then swap it in
        tmp_path = path.with_suffix(".json.tmp")
        with tmp_path.open("w", encoding="utf-8") as f:
            f.write(value)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, path)
        log.debug("Wrote %d chars to %s", len(value), path)
    
    def get_mtime(self, key: str) -> str:
        """
        Get last modification time of a key as formatted string.
        
        Returns:
            Formatted timestamp or '(not created yet)'
        """
        path = self.path_for(key)
        if not path.exists():
            return "(not created yet)"
        
        from datetime import datetime
        timestamp = datetime.fromtimestamp(path.stat().st_mtime)
        return timestamp.strftime("%Y-%m-%d %H:%M:%S")
