"""Calculator modules for profit computations."""

from .input_parser import parse_decimal, parse_whole_number
from .profit_calculator import ProfitCalculator, compute

__all__ = ["ProfitCalculator", "compute", "parse_decimal", "parse_whole_number"]
