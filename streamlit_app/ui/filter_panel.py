"""
Filter panel: a collapsed expander with one checkbox column per filter category.

Checkbox changes are forwarded to FilterSelectionModel.toggle() through
on_change callbacks, so the model stays the single source of truth.
"""

import streamlit as st

from recipe_browser.filters import FilterSelectionModel, display_name
from utils.state import filter_widget_key


def _on_filter_change(model: FilterSelectionModel, label: str) -> None:
    model.toggle(label)


def _on_clear_filters(model: FilterSelectionModel) -> None:
    model.clear()
    # Widget values live in session_state too and must be reset with the model
    for label in model.all_labels():
        st.session_state[filter_widget_key(label)] = False


def render_filter_panel(model: FilterSelectionModel) -> None:
    """
    Render the FILTERS expander for the given selection model.

    Args:
        model: The session's filter selection model
    """
    selected_count = len(model)
    title = f"FILTERS ({selected_count})" if selected_count else "FILTERS"

    with st.expander(title, expanded=False):
        categories = model.categories()
        columns = st.columns(len(categories), gap="medium")

        for column, (category, labels) in zip(columns, categories):
            with column:
                st.markdown(f"**{category.heading}**")
                for label in labels:
                    key = filter_widget_key(label)
                    # Seed widget state from the model instead of passing value=
                    if key not in st.session_state:
                        st.session_state[key] = model.is_selected(label)
                    st.checkbox(
                        display_name(label),
                        key=key,
                        on_change=_on_filter_change,
                        args=(model, label),
                    )

        st.button(
            "Clear filters",
            key="clear_filters_btn",
            disabled=selected_count == 0,
            on_click=_on_clear_filters,
            args=(model,),
        )
