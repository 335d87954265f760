"""
Key-ingredient search box and the button that runs the recipe search.
"""

import asyncio

import streamlit as st

from recipe_browser.exceptions import SearchFailed
from recipe_browser.search import RecipeSearchController
from ui.feedback import show_error, working_spinner

QUERY_INPUT_KEY = "key_ingredient_input"


def _on_query_change(controller: RecipeSearchController) -> None:
    controller.set_query_text(st.session_state[QUERY_INPUT_KEY])


def render_search_box(controller: RecipeSearchController) -> None:
    """
    Render the ingredient input and the Search Recipe button.

    Pressing the button runs controller.search() to completion. A SearchFailed
    is reported inline; the previous results stay on screen.

    Args:
        controller: The session's search controller
    """
    if QUERY_INPUT_KEY not in st.session_state:
        st.session_state[QUERY_INPUT_KEY] = controller.query_text

    input_col, button_col = st.columns([3, 1], gap="medium", vertical_alignment="bottom")

    with input_col:
        st.text_input(
            "Enter Key Ingredient",
            key=QUERY_INPUT_KEY,
            placeholder="e.g. chicken, chickpeas, salmon…",
            on_change=_on_query_change,
            args=(controller,),
        )

    with button_col:
        submitted = st.button("Search Recipe", type="primary", use_container_width=True)

    if submitted:
        # The input's on_change only fires on blur/enter, so sync before searching
        controller.set_query_text(st.session_state[QUERY_INPUT_KEY])
        with working_spinner("Finding recipes…"):
            try:
                asyncio.run(controller.search())
            except SearchFailed as e:
                show_error(str(e), hint="Check that the recipe service is running, then search again.")
