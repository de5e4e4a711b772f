import os

import pytest

from services.config import Settings
from services.errors import StorageIOError
from services.storage import LocalStorage, MemoryStorage, StorageManager


def test_local_storage_round_trip(tmp_path):
    storage = LocalStorage(tmp_path / "data")
    assert storage.get("recipes") is None

    storage.set("recipes", '{"version": 1, "recipes": []}')

    assert storage.get("recipes") == '{"version": 1, "recipes": []}'
    assert (tmp_path / "data" / "recipes.json").exists()
    assert not (tmp_path / "data" / "recipes.json.tmp").exists()


def test_local_storage_unicode(tmp_path):
    storage = LocalStorage(tmp_path)
    storage.set("recipes", "Pão de Açúcar")
    assert LocalStorage(tmp_path).get("recipes") == "Pão de Açúcar"


@pytest.mark.parametrize("key", ["", "../escape", "a/b", ".hidden"])
def test_local_storage_rejects_bad_keys(tmp_path, key):
    with pytest.raises(ValueError):
        LocalStorage(tmp_path).path_for(key)


def test_local_storage_mtime(tmp_path):
    storage = LocalStorage(tmp_path)
    assert storage.get_mtime("recipes") == "(not created yet)"
    storage.set("recipes", "[]")
    assert storage.get_mtime("recipes") != "(not created yet)"


def test_memory_storage():
    storage = MemoryStorage({"a": "1"})
    storage.set("b", "2")
    assert storage.get("a") == "1"
    assert storage.get("b") == "2"
    assert storage.get("c") is None


class FailingStorage:
    def get(self, key):
        raise PermissionError("denied")

    def set(self, key, value):
        raise OSError(28, "No space left on device")

    def get_mtime(self, key):
        raise OSError("gone")


def test_manager_wraps_os_errors():
    manager = StorageManager(backend=FailingStorage())
    with pytest.raises(StorageIOError):
        manager.get("recipes")
    with pytest.raises(StorageIOError):
        manager.set("recipes", "[]")
    assert manager.get_mtime("recipes") == "(unknown)"


def test_manager_builds_backend_from_settings(tmp_path):
    local = StorageManager(settings=Settings(data_dir=tmp_path))
    assert isinstance(local.backend, LocalStorage)
    assert local.backend.data_dir == tmp_path

    memory = StorageManager(settings=Settings(data_dir=tmp_path, storage_backend="memory"))
    assert isinstance(memory.backend, MemoryStorage)


def test_manager_passes_through(tmp_path):
    manager = StorageManager(backend=LocalStorage(tmp_path))
    manager.set("recipes", "[]")
    assert manager.get("recipes") == "[]"
    assert os.path.exists(tmp_path / "recipes.json")
