# recipes/ui/__init__.py
from recipes.navigation import Screen
from .about import page_about
from .home import page_home
from .new_recipe import page_new_recipe
from .recipe_list import page_recipes
from .state import get_navigator

_PAGES = {
    Screen.HOME: page_home,
    Screen.NEW_RECIPE: page_new_recipe,
    Screen.RECIPES: page_recipes,
    Screen.ABOUT: page_about,
}


def render_current_screen() -> None:
    _PAGES[get_navigator().current]()


__all__ = ["render_current_screen", "get_navigator"]
