"""
Streamlit entrypoint for the Recipe Profit Calculator.
- Home screen links to New Recipe, My Recipes and About
- Recipes are saved to the local data directory (see services/config.py)
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add project root to Python path FIRST
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import streamlit as st

from services.config import configure_logging, load_settings
from recipes.ui import render_current_screen

# -----------------------------------------------------------------------------
# Page setup
# -----------------------------------------------------------------------------
st.set_page_config(page_title="Calculadora de Receitas", page_icon="🧁", layout="centered")

settings = load_settings()
configure_logging(settings.log_level)

# -----------------------------------------------------------------------------
# Route to the current screen
# -----------------------------------------------------------------------------
render_current_screen()
