"""Saved recipes screen: one card per recipe with a delete button."""

from __future__ import annotations
import streamlit as st

from services import recipe_manager
from services.errors import StorageIOError
from recipes.exporters import export_to_excel
from recipes.models import Recipe
from .formatting import recipe_rows
from .state import back_button


def _render_recipe(recipe: Recipe) -> None:
    with st.container(border=True):
        st.subheader(recipe.title)
        if recipe.description:
            st.write(recipe.description)
        for label, value in recipe_rows(recipe):
            st.markdown(f"**{label}:** {value}")
        if st.button("Excluir", key=f"delete_{recipe.id}"):
            try:
                recipe_manager.delete_recipe(recipe.id)
            except StorageIOError as e:
                st.error(e.user_message)
            else:
                st.rerun()


def page_recipes() -> None:
    st.title("Minhas Receitas")

    recipes = recipe_manager.list_recipes()
    warning = recipe_manager.pop_last_warning()
    if warning:
        st.warning(warning)

    if not recipes:
        st.info("Nenhuma receita salva ainda.")
    else:
        st.caption(f"Última gravação: {recipe_manager.last_saved()}")
        export_to_excel(recipes)
        for recipe in recipes:
            _render_recipe(recipe)

    back_button()
