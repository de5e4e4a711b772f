"""
Screen navigation.

The app has four screens. Home links to the other three, every other screen
returns home, and saving a new recipe jumps straight to the recipe list.
"""

from __future__ import annotations
from enum import Enum
from typing import Dict, FrozenSet


class Screen(str, Enum):
    HOME = "home"
    NEW_RECIPE = "newRecipe"
    RECIPES = "recipes"
    ABOUT = "about"


TRANSITIONS: Dict[Screen, FrozenSet[Screen]] = {
    Screen.HOME: frozenset({Screen.NEW_RECIPE, Screen.RECIPES, Screen.ABOUT}),
    Screen.NEW_RECIPE: frozenset({Screen.HOME, Screen.RECIPES}),
    Screen.RECIPES: frozenset({Screen.HOME}),
    Screen.ABOUT: frozenset({Screen.HOME}),
}


class InvalidTransition(ValueError):
    """Raised when a screen change is not allowed from the current screen."""


def can_go(source: Screen, target: Screen) -> bool:
    return source == target or target in TRANSITIONS[source]


class Navigator:
    """Holds the current screen and enforces the allowed transitions."""

    def __init__(self, current: Screen = Screen.HOME):
        self.current = Screen(current)

    def go(self, target: Screen) -> Screen:
        """
        Move to target.

        Raises:
            InvalidTransition: If target is not reachable from the current screen
        """
        target = Screen(target)
        if not can_go(self.current, target):
            raise InvalidTransition(f"Cannot go from {self.current.value} to {target.value}")
        self.current = target
        return self.current

    def back(self) -> bool:
        """Return home. False means there was nowhere to go back to."""
        if self.current == Screen.HOME:
            return False
        self.current = Screen.HOME
        return True
