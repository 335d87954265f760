"""
UI Components Module.

This module provides the reusable Streamlit components for the Recipe Browser:
the filter panel, the search box, the result grid and feedback helpers.
"""

from ui.filter_panel import render_filter_panel
from ui.search_box import render_search_box
from ui.results import render_results

__all__ = [
    "render_filter_panel",
    "render_search_box",
    "render_results",
]
