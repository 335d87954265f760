"""
Thumbnail grid for recipe search results.
"""

from typing import List

import streamlit as st

from recipe_browser.models import RecipeResult
from ui.feedback import show_empty_state

GRID_COLUMNS = 2


def render_results(results: List[RecipeResult], has_searched: bool) -> None:
    """
    Render results as a two-column grid of image tiles linking to the source recipe.

    Args:
        results: Result list to render, in order
        has_searched: Whether a search has completed; controls the empty state
    """
    if not results:
        if has_searched:
            show_empty_state(
                "No recipes found",
                subtitle="Try a different key ingredient.",
            )
        return

    st.markdown("### Results")
    for row_start in range(0, len(results), GRID_COLUMNS):
        row = results[row_start:row_start + GRID_COLUMNS]
        columns = st.columns(GRID_COLUMNS, gap="medium")
        for column, recipe in zip(columns, row):
            with column:
                with st.container(border=True):
                    st.image(recipe.image_url, use_container_width=True)
                    st.markdown(f"**[{recipe.name}]({recipe.source_url})**")
