"""About screen."""

from __future__ import annotations
import streamlit as st

from .state import back_button

ABOUT_TEXT = (
    "Este app ajuda a calcular o lucro de uma receita produzida para venda. "
    "Informe o gasto total da receita, a quantidade produzida e o preço de venda "
    "de cada unidade para ver o lucro em reais e em porcentagem. "
    "As receitas salvas ficam guardadas neste dispositivo."
)


def page_about() -> None:
    st.title("Sobre o App")
    st.write(ABOUT_TEXT)
    back_button()
