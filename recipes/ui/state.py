"""Session state helpers shared by the screens."""

from __future__ import annotations
import logging
import streamlit as st

from recipes.navigation import InvalidTransition, Navigator, Screen

log = logging.getLogger("recipes.ui")

# Widget keys of the new-recipe form
FORM_KEYS = ("title", "description", "expense", "quantity", "unit_price")


def get_navigator() -> Navigator:
    if "navigator" not in st.session_state:
        st.session_state.navigator = Navigator()
    return st.session_state.navigator


def navigate(target: Screen) -> None:
    """Switch screen and rerun; illegal moves are logged and ignored."""
    try:
        get_navigator().go(target)
    except InvalidTransition as e:
        log.warning("%s", e)
        return
    st.rerun()


def back_button() -> None:
    st.markdown("---")
    if st.button("← Voltar", key="nav_back"):
        if get_navigator().back():
            st.rerun()


def clear_form() -> None:
    for key in FORM_KEYS + ("preview",):
        st.session_state.pop(key, None)
