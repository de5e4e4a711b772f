"""Display formatting for money and percentages."""

from __future__ import annotations
from typing import List, Optional, Tuple

from recipes.models import ProfitReport, Recipe


def format_money(x: Optional[float]) -> str:
    if x is None:
        return "—"
    return f"R${x:.2f}"


def format_percent(x: Optional[float]) -> str:
    if x is None:
        return "—"
    return f"{x:.2f}%"


def report_rows(report: ProfitReport) -> List[Tuple[str, str]]:
    """Label/value pairs shown under a preview or a saved recipe."""
    return [
        ("Gasto Total", format_money(report.total_expense)),
        ("Preço Total de Venda", format_money(report.total_sales)),
        ("Lucro", format_money(report.profit)),
        ("Lucro (%)", format_percent(report.profit_percentage)),
    ]


def recipe_rows(recipe: Recipe) -> List[Tuple[str, str]]:
    return [("Quantidade Produzida", str(recipe.quantity_produced))] + report_rows(recipe.report)
