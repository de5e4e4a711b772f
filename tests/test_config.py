from pathlib import Path

import pytest

from services.config import load_settings
from services.config import DEFAULT_DATA_DIR


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("RECIPES_DATA_DIR", "RECIPES_STORAGE", "RECIPES_STORAGE_KEY", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    settings = load_settings()
    assert settings.data_dir == DEFAULT_DATA_DIR
    assert settings.storage_key == "recipes"
    assert settings.storage_backend == "local"
    assert settings.log_level == "INFO"


def test_environment_overrides(clean_env, tmp_path):
    clean_env.setenv("RECIPES_DATA_DIR", str(tmp_path))
    clean_env.setenv("RECIPES_STORAGE", "Memory")
    clean_env.setenv("RECIPES_STORAGE_KEY", "receitas")
    clean_env.setenv("LOG_LEVEL", "debug")

    settings = load_settings()

    assert settings.data_dir == Path(tmp_path).resolve()
    assert settings.storage_backend == "memory"
    assert settings.storage_key == "receitas"
    assert settings.log_level == "DEBUG"


def test_unknown_backend(clean_env):
    clean_env.setenv("RECIPES_STORAGE", "gist")
    with pytest.raises(ValueError):
        load_settings()
