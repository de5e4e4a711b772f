"""Profit calculator - Pure calculation logic."""

from __future__ import annotations
import logging
from typing import Any, Dict, List

from services.errors import ValidationError
from recipes.models import ProfitReport
from .input_parser import InvalidNumber, parse_decimal

log = logging.getLogger("recipes.calculator")

FIELD_LABELS = {
    "expense": "Gasto total",
    "quantity": "Quantidade produzida",
    "unit_price": "Preço unitário",
}


class ProfitCalculator:
    """Handles profit calculations."""
    
    @staticmethod
    def calculate(
        total_expense: float,
        quantity: float,
        unit_price: float,
    ) -> ProfitReport:
        """
        Calculate profit figures.
        
        The percentage is None when total_expense is zero; an infinite
        value is never produced.
        
        Returns:
            ProfitReport with all financial metrics
        """
        total_expense = float(total_expense)
        total_sales = float(quantity) * float(unit_price)
        profit = total_sales - total_expense
        profit_percentage = (profit / total_expense * 100.0) if total_expense else None
        
        return ProfitReport(
            total_expense=total_expense,
            total_sales=total_sales,
            profit=profit,
            profit_percentage=profit_percentage,
        )


def parse_inputs(expense: Any, quantity: Any, unit_price: Any) -> Dict[str, float]:
    """
    Parse the three raw inputs, reporting every bad field at once.
    
    Raises:
        ValidationError: If any field is blank or not a valid number
    """
    raw = {"expense": expense, "quantity": quantity, "unit_price": unit_price}
    parsed: Dict[str, float] = {}
    missing: List[str] = []
    invalid: List[str] = []
    
    for name, value in raw.items():
        try:
            number = parse_decimal(value)
        except InvalidNumber:
            invalid.append(name)
            continue
        if number is None:
            missing.append(name)
        else:
            parsed[name] = number
    
    if missing:
        log.debug("Missing inputs: %s", missing)
        raise ValidationError(fields=missing + invalid)
    if invalid:
        log.debug("Invalid inputs: %s", invalid)
        labels = ", ".join(FIELD_LABELS[n] for n in invalid)
        raise ValidationError(f"Valor inválido em: {labels}.", fields=invalid)
    return parsed


def compute(expense: Any, quantity: Any, unit_price: Any) -> ProfitReport:
    """
    Parse user input and compute the profit report.
    
    Args:
        expense: Total cost of production
        quantity: Number of units produced
        unit_price: Sale price per unit
        
    Returns:
        ProfitReport
        
    Raises:
        ValidationError: If any input is missing, empty or not numeric
    """
    values = parse_inputs(expense, quantity, unit_price)
    return ProfitCalculator.calculate(
        values["expense"], values["quantity"], values["unit_price"]
    )
