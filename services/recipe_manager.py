"""
Recipe manager - Facade over the calculator and the recipe store.

Each function maps to one user action. A corrupt record is backed up and
replaced by an empty collection before any action touches it. Validation
and storage errors are raised to the UI, except on listing, where an
unreadable record degrades to an empty list plus a warning.
"""

from __future__ import annotations
import logging
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, List, Optional

from recipes.calculators import compute, parse_whole_number
from recipes.calculators.input_parser import InvalidNumber
from recipes.models import ProfitReport, Recipe
from .config import load_settings
from .errors import CorruptDataError, StorageIOError, ValidationError
from .repositories import RecipeStore
from .storage import StorageManager

log = logging.getLogger("recipes.manager")


# ============================================================================
# Module-level store instance (singleton pattern)
# ============================================================================
_store: Optional[RecipeStore] = None
_last_warning: Optional[str] = None
# Recipe cached in memory whose write failed
_pending_id: Optional[str] = None


def _get_store() -> RecipeStore:
    """Get or create the recipe store instance."""
    global _store
    if _store is None:
        settings = load_settings()
        _store = RecipeStore(StorageManager(settings=settings), key=settings.storage_key)
    return _store


def set_store(store: Optional[RecipeStore]) -> None:
    """Replace the store instance (None rebuilds it from settings on next use)."""
    global _store, _last_warning, _pending_id
    _store = store
    _last_warning = None
    _pending_id = None


def get_last_warning() -> Optional[str]:
    """Get last warning message (for UI display)."""
    return _last_warning


def pop_last_warning() -> Optional[str]:
    """Get last warning message and clear it, so it is shown once."""
    message = _last_warning
    _set_warning(None)
    return message


def _set_warning(message: Optional[str]) -> None:
    global _last_warning
    _last_warning = message


def _load_store() -> RecipeStore:
    """
    Get the store with its collection loaded.
    
    A corrupt record is backed up and replaced by an empty collection,
    with a warning.
    
    Raises:
        StorageIOError: If the record cannot be read or backed up
    """
    store = _get_store()
    try:
        store.load_all()
    except CorruptDataError as e:
        log.warning("Recipe data is corrupt, starting empty: %s", e)
        try:
            store.reset_corrupt()
        except StorageIOError as backup_error:
            log.error("Could not back up corrupt data: %s", backup_error)
            raise StorageIOError(f"{e.user_message} {backup_error.user_message}") from backup_error
        _set_warning(f"{CorruptDataError.user_message} Uma cópia foi guardada em '{store.backup_key}'.")
    return store


def _same_content(a: Recipe, b: Recipe) -> bool:
    return (a.title, a.description, a.quantity_produced, a.report) == (
        b.title, b.description, b.quantity_produced, b.report
    )


# ============================================================================
# Public API
# ============================================================================

def preview(expense: Any, quantity: Any, unit_price: Any) -> ProfitReport:
    """
    Compute a report without saving anything.
    
    Raises:
        ValidationError: If any input is missing or not numeric
    """
    return compute(expense, quantity, unit_price)


def add_recipe(
    title: str,
    description: str,
    expense: Any,
    quantity: Any,
    unit_price: Any,
) -> Recipe:
    """
    Compute and persist a new recipe.
    
    Saving the same inputs again after a failed write retries that write
    instead of adding a second copy.
    
    Returns:
        The saved Recipe
        
    Raises:
        ValidationError: If inputs are invalid or quantity is fractional
        StorageIOError: If the store fails; ``pending_id`` is set when the
            recipe was kept in memory
    """
    global _pending_id
    report = compute(expense, quantity, unit_price)
    try:
        quantity_produced = parse_whole_number(quantity)
    except InvalidNumber:
        raise ValidationError(
            "A quantidade produzida deve ser um número inteiro.", fields=["quantity"]
        )
    
    _set_warning(None)
    store = _load_store()
    recipe = Recipe.create(
        recipe_id="",
        title=title,
        description=description,
        quantity_produced=quantity_produced,
        report=report,
    )
    
    pending = store.get(_pending_id) if _pending_id else None
    if pending is not None and _same_content(pending, recipe):
        try:
            store.flush()
        except StorageIOError as e:
            raise StorageIOError(e.user_message, pending_id=pending.id) from e
        log.info("Retried write of pending recipe %s", pending.id)
        _pending_id = None
        return pending
    
    recipe = replace(
        recipe,
        id=store.new_id(),
        created_at=datetime.now(timezone.utc).isoformat(timespec="seconds"),
    )
    try:
        store.save(recipe)
    except StorageIOError as e:
        _pending_id = recipe.id
        raise StorageIOError(e.user_message, pending_id=recipe.id) from e
    _pending_id = None
    return recipe


def list_recipes() -> List[Recipe]:
    """
    List saved recipes in the order they were added.
    
    A corrupt record is backed up and replaced by an empty list; a read
    failure returns an empty list. Both set the last warning.
    """
    try:
        return _load_store().load_all()
    except StorageIOError as e:
        _set_warning(e.user_message)
        return []


def delete_recipe(recipe_id: str) -> None:
    """
    Delete a recipe by id; unknown ids are ignored.
    
    Raises:
        StorageIOError: If the store fails
    """
    global _pending_id
    _set_warning(None)
    _load_store().delete(recipe_id)
    # The write carried any pending recipe along with it
    _pending_id = None


def last_saved() -> str:
    """Get last modification time of the stored collection."""
    store = _get_store()
    return store.storage.get_mtime(store.key)
