# services/__init__.py
"""Services package for the recipe calculator"""
