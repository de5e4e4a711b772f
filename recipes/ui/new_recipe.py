"""
New Recipe Screen
=================

Form with title, description, total expense, quantity produced and unit
price. "Calcular Receita" shows a preview; "Salvar Receita" computes again,
stores the recipe and jumps to the recipe list.
"""

from __future__ import annotations
import streamlit as st

from services import recipe_manager
from services.errors import StorageIOError, ValidationError
from recipes.models import ProfitReport
from recipes.navigation import Screen
from .formatting import report_rows
from .state import back_button, clear_form, navigate


def _render_preview(report: ProfitReport) -> None:
    st.markdown("### Resultado")
    cols = st.columns(4)
    for col, (label, value) in zip(cols, report_rows(report)):
        with col:
            st.metric(label, value)
    if report.profit_percentage is None:
        st.caption("Lucro (%) indefinido: o gasto total é zero.")
    if report.is_profitable:
        st.success("A receita dá lucro.")
    else:
        st.warning("A receita não dá lucro com esse preço de venda.")


def storage_failure_message(error: StorageIOError) -> str:
    """Only a failed write leaves the new recipe in memory."""
    if error.pending_id is None:
        return error.user_message
    return (
        f"{error.user_message} A receita ficará disponível apenas nesta sessão; "
        "clique em Salvar Receita novamente para tentar gravar."
    )


def page_new_recipe() -> None:
    st.title("Nova Receita")

    st.text_input("Título (opcional)", key="title")
    st.text_input("Descrição (opcional)", key="description")
    c1, c2, c3 = st.columns(3)
    with c1:
        st.text_input("Gasto Total (R$) *", key="expense", placeholder="0,00")
    with c2:
        st.text_input("Quantidade Produzida *", key="quantity", placeholder="0")
    with c3:
        st.text_input("Preço de Venda (R$) *", key="unit_price", placeholder="0,00")

    b1, b2 = st.columns(2)
    with b1:
        calc_clicked = st.button("Calcular Receita", use_container_width=True, key="calc_btn")
    with b2:
        save_clicked = st.button("Salvar Receita", type="primary", use_container_width=True, key="save_btn")

    values = (
        st.session_state.get("expense"),
        st.session_state.get("quantity"),
        st.session_state.get("unit_price"),
    )

    if calc_clicked:
        try:
            st.session_state.preview = recipe_manager.preview(*values)
        except ValidationError as e:
            st.session_state.pop("preview", None)
            st.error(e.user_message)

    if save_clicked:
        try:
            recipe_manager.add_recipe(
                st.session_state.get("title", ""),
                st.session_state.get("description", ""),
                *values,
            )
        except ValidationError as e:
            st.error(e.user_message)
        except StorageIOError as e:
            st.warning(storage_failure_message(e))
        else:
            clear_form()
            navigate(Screen.RECIPES)

    if st.session_state.get("preview") is not None:
        _render_preview(st.session_state.preview)

    back_button()
