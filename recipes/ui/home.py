"""Home screen: title and links to the other screens."""

from __future__ import annotations
import streamlit as st

from recipes.navigation import Screen
from .state import navigate


def page_home() -> None:
    st.title("Calculadora de Receitas")
    st.markdown("---")
    if st.button("Nova Receita", use_container_width=True, key="nav_new_recipe"):
        navigate(Screen.NEW_RECIPE)
    if st.button("Minhas Receitas", use_container_width=True, key="nav_recipes"):
        navigate(Screen.RECIPES)
    if st.button("Sobre o App", use_container_width=True, key="nav_about"):
        navigate(Screen.ABOUT)
