"""Excel export functionality."""

from __future__ import annotations
from io import BytesIO
from datetime import datetime
from typing import List

import pandas as pd
import streamlit as st

from recipes.models import Recipe

COLUMNS = [
    "Título",
    "Descrição",
    "Quantidade Produzida",
    "Gasto Total (R$)",
    "Preço Total de Venda (R$)",
    "Lucro (R$)",
    "Lucro (%)",
    "Criada em",
]


def recipes_to_dataframe(recipes: List[Recipe]) -> pd.DataFrame:
    """One row per recipe, in saved order; undefined percentages stay empty."""
    rows = [
        {
            "Título": r.title,
            "Descrição": r.description,
            "Quantidade Produzida": r.quantity_produced,
            "Gasto Total (R$)": round(r.report.total_expense, 2),
            "Preço Total de Venda (R$)": round(r.report.total_sales, 2),
            "Lucro (R$)": round(r.report.profit, 2),
            "Lucro (%)": (
                None if r.report.profit_percentage is None
                else round(r.report.profit_percentage, 2)
            ),
            "Criada em": r.created_at or "",
        }
        for r in recipes
    ]
    return pd.DataFrame(rows, columns=COLUMNS)


def build_workbook(recipes: List[Recipe]) -> bytes:
    """Render the recipe list as an .xlsx file."""
    buf = BytesIO()
    with pd.ExcelWriter(buf, engine="xlsxwriter") as xw:
        df = recipes_to_dataframe(recipes)
        df.to_excel(xw, index=False, sheet_name="Receitas")
        ws = xw.sheets["Receitas"]
        ws.set_column(0, 1, 32)
        ws.set_column(2, 7, 20)
    return buf.getvalue()


def export_to_excel(recipes: List[Recipe]) -> None:
    """Render Excel download button."""
    calc_id = datetime.now().strftime("%Y%m%d-%H%M%S")
    st.download_button(
        "Baixar Excel",
        data=build_workbook(recipes),
        file_name=f"receitas_{calc_id}.xlsx",
        mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        use_container_width=True,
    )
