"""
Recipe Browser - Streamlit Frontend Main Entry Point.

Single-page app: a collapsible filter panel, a key-ingredient search box and a
thumbnail grid of recipes returned by the recipe service.

Run with:
    streamlit run streamlit_app/app.py
"""

import sys
from pathlib import Path

# Ensure the streamlit_app directory is in the Python path
# This allows imports to work regardless of how the app is run
streamlit_app_dir = Path(__file__).parent
if str(streamlit_app_dir) not in sys.path:
    sys.path.insert(0, str(streamlit_app_dir))

# Add project root to path so recipe_browser imports without an install
project_root = streamlit_app_dir.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# Import config early to load .env file before any other code accesses environment variables
from recipe_browser.config import configure_logging

import streamlit as st

from ui import render_filter_panel, render_search_box, render_results
from utils.state import get_filter_model, get_search_controller

configure_logging()

# Page configuration - must be called before any other Streamlit commands
st.set_page_config(
    page_title="Recipe Browser",
    page_icon="🍳",
    layout="centered",
)

st.title("🍳 Recipe Browser")
st.caption("Find recipes by key ingredient.")

filter_model = get_filter_model()
search_controller = get_search_controller()

render_filter_panel(filter_model)
render_search_box(search_controller)
render_results(search_controller.results, search_controller.has_searched)
