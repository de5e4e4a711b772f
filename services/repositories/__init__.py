"""Repository layer for data access."""

from .recipe_store import RecipeStore, recipe_to_record, recipe_from_record

__all__ = ["RecipeStore", "recipe_to_record", "recipe_from_record"]
