"""Export modules for saved recipes."""

from .excel_exporter import build_workbook, export_to_excel, recipes_to_dataframe

__all__ = ["build_workbook", "export_to_excel", "recipes_to_dataframe"]
