"""
Recipe Store
============

Keeps the list of saved recipes in a single record of a string-keyed blob
store. Every mutation rewrites the whole collection.

Stored layout (version 1):
    {"version": 1, "recipes": [{"id": ..., "title": ..., ...}, ...]}

The legacy layout, a bare JSON array with a ``quantity`` field and numeric
ids, is still readable and is upgraded on the next write.
"""

from __future__ import annotations
import json
import logging
import math
from typing import Any, Callable, Dict, List, Optional

from recipes.models import ProfitReport, Recipe
from ..errors import CorruptDataError
from ..utils import generate_recipe_id

log = logging.getLogger("recipes.store")

SCHEMA_VERSION = 1


# ============================================================================
# Serialization
# ============================================================================

def recipe_to_record(recipe: Recipe) -> Dict[str, Any]:
    """Convert a Recipe into its stored dict."""
    report = recipe.report
    return {
        "id": recipe.id,
        "title": recipe.title,
        "description": recipe.description,
        "quantityProduced": recipe.quantity_produced,
        "totalExpense": report.total_expense,
        "totalSales": report.total_sales,
        "profit": report.profit,
        "profitPercentage": report.profit_percentage,
        "createdAt": recipe.created_at,
    }


def _number(raw: Dict[str, Any], key: str) -> float:
    value = raw[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{key} is not a number: {value!r}")
    return float(value)


def _optional_number(raw: Dict[str, Any], key: str) -> Optional[float]:
    value = raw.get(key)
    if value is None:
        return None
    value = _number(raw, key)
    # Legacy records may hold NaN/Infinity from an unguarded division
    return value if math.isfinite(value) else None


def recipe_from_record(raw: Any) -> Recipe:
    """
    Convert a stored dict into a Recipe.
    
    Raises:
        KeyError, TypeError, ValueError: If the record has the wrong shape
    """
    if not isinstance(raw, dict):
        raise TypeError(f"Recipe record is not an object: {raw!r}")
    
    recipe_id = raw["id"]
    if isinstance(recipe_id, bool) or not isinstance(recipe_id, (str, int)) or recipe_id == "":
        raise TypeError(f"Invalid recipe id: {recipe_id!r}")
    
    if "quantityProduced" in raw:
        quantity = raw["quantityProduced"]
    else:
        quantity = raw["quantity"]
    if isinstance(quantity, bool) or not isinstance(quantity, (int, float)):
        raise TypeError(f"Invalid quantity: {quantity!r}")
    
    report = ProfitReport(
        total_expense=_number(raw, "totalExpense"),
        total_sales=_number(raw, "totalSales"),
        profit=_number(raw, "profit"),
        profit_percentage=_optional_number(raw, "profitPercentage"),
    )
    created_at = raw.get("createdAt")
    
    return Recipe.create(
        recipe_id=str(recipe_id),
        title=str(raw.get("title") or ""),
        description=str(raw.get("description") or ""),
        quantity_produced=int(quantity),
        report=report,
        created_at=str(created_at) if created_at else None,
    )


def dumps_collection(recipes: List[Recipe]) -> str:
    """Serialize the full collection; non-finite floats are refused."""
    payload = {
        "version": SCHEMA_VERSION,
        "recipes": [recipe_to_record(r) for r in recipes],
    }
    return json.dumps(payload, ensure_ascii=False, indent=2, allow_nan=False)


def loads_collection(text: str) -> List[Recipe]:
    """
    Deserialize the full collection.
    
    Raises:
        CorruptDataError: If the text is not a valid recipe collection
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise CorruptDataError(f"Dados salvos ilegíveis: {e}") from e
    
    if isinstance(data, list):
        items = data
    elif isinstance(data, dict):
        version = data.get("version")
        if not isinstance(version, int) or isinstance(version, bool):
            raise CorruptDataError("Registro sem versão válida.")
        if version > SCHEMA_VERSION:
            raise CorruptDataError(f"Versão de dados não suportada: {version}.")
        items = data.get("recipes")
        if not isinstance(items, list):
            raise CorruptDataError("Registro sem lista de receitas.")
    else:
        raise CorruptDataError("Formato de dados inesperado.")
    
    recipes: List[Recipe] = []
    for i, raw in enumerate(items):
        try:
            recipes.append(recipe_from_record(raw))
        except (KeyError, TypeError, ValueError) as e:
            raise CorruptDataError(f"Receita #{i + 1} inválida: {e}") from e
    return recipes


# ============================================================================
# Store
# ============================================================================

class RecipeStore:
    """Durable, ordered list of recipes behind load/save/delete."""
    
    def __init__(
        self,
        storage,
        key: str = "recipes",
        id_factory: Callable[[], str] = generate_recipe_id,
    ):
        """
        Args:
            storage: Blob store with get(key) and set(key, value)
            key: Name of the record holding the collection
            id_factory: Callable returning a fresh recipe id
        """
        self.storage = storage
        self.key = key
        self.id_factory = id_factory
        self._recipes: Optional[List[Recipe]] = None
    
    @property
    def backup_key(self) -> str:
        return f"{self.key}.corrupt"
    
    def new_id(self) -> str:
        """Return an id not used by any loaded recipe."""
        used = {r.id for r in self._recipes or []}
        recipe_id = self.id_factory()
        while recipe_id in used:
            recipe_id = self.id_factory()
        return recipe_id
    
    def load_all(self) -> List[Recipe]:
        """
        Load all recipes in insertion order.
        
        Returns:
            Copy of the cached list (empty if nothing stored yet)
            
        Raises:
            CorruptDataError: If the stored record cannot be deserialized
            StorageIOError: If the backing store read fails
        """
        if self._recipes is None:
            text = self.storage.get(self.key)
            self._recipes = [] if text is None else loads_collection(text)
            log.debug("Loaded %d recipes from %r", len(self._recipes), self.key)
        return list(self._recipes)
    
    def get(self, recipe_id: str) -> Optional[Recipe]:
        """Find a loaded recipe by id."""
        for r in self.load_all():
            if r.id == str(recipe_id):
                return r
        return None
    
    def save(self, recipe: Recipe) -> None:
        """
        Append a recipe and write the collection back.
        
        Raises:
            ValueError: If a recipe with the same id already exists
            StorageIOError: If the write fails (the recipe stays cached)
        """
        self.load_all()
        if any(r.id == recipe.id for r in self._recipes):
            raise ValueError(f"Duplicate recipe id: {recipe.id}")
        self._recipes.append(recipe)
        self.flush()
        log.info("Saved recipe %s (%r)", recipe.id, recipe.title)
    
    def delete(self, recipe_id: str) -> None:
        """Remove a recipe by id; unknown ids are a no-op."""
        self.load_all()
        remaining = [r for r in self._recipes if r.id != str(recipe_id)]
        removed = len(self._recipes) - len(remaining)
        self._recipes = remaining
        self.flush()
        if removed:
            log.info("Deleted recipe %s", recipe_id)
        else:
            log.debug("Delete of unknown recipe %s ignored", recipe_id)
    
    def reset_corrupt(self) -> None:
        """
        Back up an unreadable record and start from an empty collection.
        
        The raw text is copied to ``backup_key`` before anything is overwritten.
        """
        raw = self.storage.get(self.key)
        if raw is not None:
            self.storage.set(self.backup_key, raw)
            log.warning("Backed up unreadable record %r to %r", self.key, self.backup_key)
        self._recipes = []
    
    def flush(self) -> None:
        """Write the cached collection back to the store."""
        if self._recipes is None:
            return
        self.storage.set(self.key, dumps_collection(self._recipes))
