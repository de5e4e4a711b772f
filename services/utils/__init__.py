"""Utility functions."""

from .id_generator import generate_recipe_id

__all__ = ["generate_recipe_id"]
