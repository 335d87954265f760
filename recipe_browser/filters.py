"""
Filter selection model for the recipe browser.

This module owns the fixed universe of filter labels (meal type, cuisine, diet
and health tags) and the per-session selection state built on top of it.

Each category maps explicitly to its ordered label sequence. Labels are unique
across the whole universe, so selection state is keyed by label text alone.
The uniqueness is checked once when the module is imported.

# NOTE: Selected filters are collected here but are not sent with the recipe
    search request. selected_by_category() is the read accessor a request
    builder would use once the recipe service accepts filter parameters.
"""

import logging
from enum import Enum
from typing import Dict, FrozenSet, List, Set, Tuple

logger = logging.getLogger(__name__)


class FilterCategory(str, Enum):
    """The four fixed groupings of selectable filter labels."""

    MEAL_TYPE = "meal_type"
    CUISINE_TYPE = "cuisine_type"
    DIET = "diet"
    HEALTH = "health"

    @property
    def heading(self) -> str:
        """Human-readable heading shown above the category's checkboxes."""
        return CATEGORY_HEADINGS[self]


CATEGORY_HEADINGS: Dict[FilterCategory, str] = {
    FilterCategory.MEAL_TYPE: "Meal Type",
    FilterCategory.CUISINE_TYPE: "Cuisine Type",
    FilterCategory.DIET: "Diet",
    FilterCategory.HEALTH: "Health",
}

# Ordered label universe, in display order
FILTER_LABELS: Dict[FilterCategory, Tuple[str, ...]] = {
    FilterCategory.MEAL_TYPE: ("Breakfast", "Lunch", "Dinner"),
    FilterCategory.CUISINE_TYPE: (
        "American",
        "Asian",
        "Caribbean",
        "Chinese",
        "French",
        "Indian",
        "Italian",
        "Japanese",
        "Mediterranean",
        "Mexican",
        "Middle Eastern",
    ),
    FilterCategory.DIET: (
        "high-fiber",
        "high-protein",
        "low-carb",
        "low-fat",
        "low-sodium",
    ),
    FilterCategory.HEALTH: (
        "dairy-free",
        "gluten-free",
        "keto-friendly",
        "kosher",
        "low-sugar",
        "paleo",
        "peanut-free",
        "vegan",
        "vegetarian",
    ),
}


def _build_label_index() -> Dict[str, FilterCategory]:
    """
    Map every label to the category that owns it.

    Raises:
        RuntimeError: If a label appears in more than one category
    """
    index: Dict[str, FilterCategory] = {}
    for category, labels in FILTER_LABELS.items():
        for label in labels:
            if label in index:
                raise RuntimeError(
                    f"Filter label {label!r} is defined in both "
                    f"{index[label].value} and {category.value}"
                )
            index[label] = category
    return index


_LABEL_INDEX = _build_label_index()


def display_name(label: str) -> str:
    """
    Convert a hyphen-separated label into space-separated title-cased words.

    Only the first character of each segment is upper-cased; the remaining
    characters are left as they are.

    Args:
        label: Filter label (e.g., "low-carb", "vegan", "Middle Eastern")

    Returns:
        Display string (e.g., "Low Carb", "Vegan", "Middle Eastern")

    Raises:
        ValueError: If label is empty or contains an empty segment

    Examples:
        >>> display_name("gluten-free")
        'Gluten Free'
    """
    if not label:
        raise ValueError("display_name() requires a non-empty label")

    words: List[str] = []
    for segment in label.split("-"):
        if not segment:
            raise ValueError(f"Label {label!r} contains an empty segment")
        words.append(segment[0].upper() + segment[1:])
    return " ".join(words)


def category_of(label: str) -> FilterCategory:
    """
    Look up the category that owns a label.

    Raises:
        ValueError: If the label is not part of the filter universe
    """
    try:
        return _LABEL_INDEX[label]
    except KeyError:
        raise ValueError(f"Unknown filter label: {label!r}") from None


class FilterSelectionModel:
    """
    Tracks which filter labels are currently active for one UI session.

    The selection is always a subset of the fixed label universe. It starts
    empty and only changes through toggle() and clear().
    """

    def __init__(self) -> None:
        self._categories: Tuple[Tuple[FilterCategory, Tuple[str, ...]], ...] = tuple(
            (category, FILTER_LABELS[category]) for category in FilterCategory
        )
        self._selected: Set[str] = set()

    def categories(self) -> Tuple[Tuple[FilterCategory, Tuple[str, ...]], ...]:
        """Return the static label universe as (category, labels) pairs in display order."""
        return self._categories

    def all_labels(self) -> Tuple[str, ...]:
        """Return every label in the universe, flattened in display order."""
        return tuple(label for _, labels in self._categories for label in labels)

    def toggle(self, label: str) -> bool:
        """
        Flip the membership of a label in the selection.

        Args:
            label: Filter label from the universe

        Returns:
            The new selection state of the label

        Raises:
            ValueError: If the label is not part of the filter universe
        """
        category = category_of(label)
        if label in self._selected:
            self._selected.discard(label)
            now_selected = False
        else:
            self._selected.add(label)
            now_selected = True
        logger.debug("Toggled filter %r (%s): selected=%s", label, category.value, now_selected)
        return now_selected

    def is_selected(self, label: str) -> bool:
        """Return True if the label is currently active."""
        return label in self._selected

    def selected(self) -> FrozenSet[str]:
        """Return a snapshot of the active labels."""
        return frozenset(self._selected)

    def selected_by_category(self) -> Dict[FilterCategory, Tuple[str, ...]]:
        """
        Group the active labels by category.

        Every category is present in the result; labels keep universe order.
        """
        return {
            category: tuple(label for label in labels if label in self._selected)
            for category, labels in self._categories
        }

    def clear(self) -> None:
        """Deactivate every label."""
        self._selected.clear()

    def __len__(self) -> int:
        return len(self._selected)
