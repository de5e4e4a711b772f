import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from services import recipe_manager
from services.repositories import RecipeStore
from services.storage import MemoryStorage


@pytest.fixture
def memory():
    return MemoryStorage()


@pytest.fixture
def store(memory):
    return RecipeStore(memory)


@pytest.fixture
def manager_store(store):
    recipe_manager.set_store(store)
    yield store
    recipe_manager.set_store(None)
