"""
Session State Management Module.

This module wraps Streamlit's session_state to give each browser session its
own FilterSelectionModel and RecipeSearchController. Nothing is shared between
sessions, and nothing survives a page refresh or a new tab.

# NOTE: Streamlit reruns the page script on every interaction, so the model and
    controller must live in session_state rather than in module globals.
"""

import streamlit as st

from recipe_browser.filters import FilterSelectionModel
from recipe_browser.search import RecipeSearchController

# Session state keys
FILTER_MODEL_KEY = "filter_model"
SEARCH_CONTROLLER_KEY = "search_controller"


def get_filter_model() -> FilterSelectionModel:
    """
    Get the filter selection model for this session, creating it on first use.

    Returns:
        FilterSelectionModel owned by the current session
    """
    if FILTER_MODEL_KEY not in st.session_state:
        st.session_state[FILTER_MODEL_KEY] = FilterSelectionModel()
    return st.session_state[FILTER_MODEL_KEY]


def get_search_controller() -> RecipeSearchController:
    """
    Get the search controller for this session, creating it on first use.

    The controller's service client reads its URL and timeout from the
    environment (see recipe_browser.config).

    Returns:
        RecipeSearchController owned by the current session
    """
    if SEARCH_CONTROLLER_KEY not in st.session_state:
        st.session_state[SEARCH_CONTROLLER_KEY] = RecipeSearchController()
    return st.session_state[SEARCH_CONTROLLER_KEY]


def filter_widget_key(label: str) -> str:
    """Session state key of the checkbox widget for a filter label."""
    return f"filter_checkbox_{label}"
