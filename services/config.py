"""
Configuration
=============

Settings are resolved in this order:
1. Environment variable
2. Streamlit secrets (``.streamlit/secrets.toml``)
3. Built-in default

Logging is configured once per process via ``configure_logging``.
"""

from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
STORAGE_BACKENDS = ("local", "memory")
# app.py lives one level above this package
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[1] / "data"


def _secrets_file_present() -> bool:
    """Streamlit renders an error box when secrets are read without a file."""
    return any(
        (base / ".streamlit" / "secrets.toml").exists()
        for base in (Path.home(), Path.cwd())
    )


def get_setting(name: str, default: Optional[str] = None) -> Optional[str]:
    """Get setting from environment or Streamlit secrets."""
    value = os.environ.get(name)
    if value:
        return value
    if not _secrets_file_present():
        return default
    try:
        import streamlit as st
        secret = st.secrets.get(name)
    except Exception:
        # No secrets.toml, or not running under Streamlit
        secret = None
    if secret:
        return str(secret)
    return default


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    storage_key: str = "recipes"
    storage_backend: str = "local"
    log_level: str = "INFO"


def load_settings() -> Settings:
    """
    Build settings from the environment.

    Returns:
        Settings instance

    Raises:
        ValueError: If RECIPES_STORAGE names an unknown backend
    """
    data_dir = get_setting("RECIPES_DATA_DIR")
    backend = (get_setting("RECIPES_STORAGE", "local") or "local").strip().lower()
    if backend not in STORAGE_BACKENDS:
        raise ValueError(
            f"Unknown storage backend {backend!r}; expected one of {', '.join(STORAGE_BACKENDS)}"
        )

    return Settings(
        data_dir=Path(data_dir).expanduser().resolve() if data_dir else DEFAULT_DATA_DIR,
        storage_key=(get_setting("RECIPES_STORAGE_KEY", "recipes") or "recipes").strip(),
        storage_backend=backend,
        log_level=(get_setting("LOG_LEVEL", "INFO") or "INFO").upper(),
    )


_logging_configured = False


def configure_logging(level: str = "INFO") -> None:
    """Install the root handler once; later calls only adjust the level."""
    global _logging_configured
    if not _logging_configured:
        logging.basicConfig(level=level, format=LOG_FORMAT)
        _logging_configured = True
    logging.getLogger("recipes").setLevel(level)
