"""
Domain entities.

ProfitReport is derived from the three numeric inputs; Recipe embeds the
report computed at creation and is never updated afterwards.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

DEFAULT_TITLE = "Receita"


@dataclass(frozen=True)
class ProfitReport:
    total_expense: float
    total_sales: float
    profit: float
    # None when total_expense is zero
    profit_percentage: Optional[float]

    @property
    def is_profitable(self) -> bool:
        return self.profit > 0


@dataclass(frozen=True)
class Recipe:
    id: str
    title: str
    description: str
    quantity_produced: int
    report: ProfitReport
    created_at: Optional[str] = None

    @classmethod
    def create(
        cls,
        recipe_id: str,
        title: str,
        description: str,
        quantity_produced: int,
        report: ProfitReport,
        created_at: Optional[str] = None,
    ) -> "Recipe":
        """Build a recipe, falling back to the default title when blank."""
        if quantity_produced < 0:
            raise ValueError("quantity_produced must be non-negative")
        return cls(
            id=str(recipe_id),
            title=(title or "").strip() or DEFAULT_TITLE,
            description=(description or "").strip(),
            quantity_produced=int(quantity_produced),
            report=report,
            created_at=created_at,
        )
