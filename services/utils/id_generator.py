"""ID generation utilities."""

from __future__ import annotations
import uuid


def generate_recipe_id() -> str:
    """
    Generate a new recipe identifier.
    
    Timestamps can repeat when two recipes are saved within the same
    millisecond; random UUIDs do not depend on the clock.
    
    Returns:
        32-character UUID4 hex string
    """
    return uuid.uuid4().hex
