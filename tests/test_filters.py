"""
Tests for the filter selection model and label formatting.

These tests verify that:
- The label universe has the expected categories, sizes and order
- Selection starts empty and toggling is an involution
- Toggling one label never affects another
- display_name() title-cases hyphenated labels
"""

import pytest

from recipe_browser.filters import (
    FILTER_LABELS,
    FilterCategory,
    FilterSelectionModel,
    category_of,
    display_name,
)


@pytest.fixture
def model() -> FilterSelectionModel:
    return FilterSelectionModel()


class TestCategories:
    """Tests for the static label universe."""

    def test_four_categories_with_expected_sizes(self, model):
        """Test categories() returns MealType, CuisineType, Diet, Health with 3, 11, 5, 9 labels."""
        categories = model.categories()

        assert [category for category, _ in categories] == [
            FilterCategory.MEAL_TYPE,
            FilterCategory.CUISINE_TYPE,
            FilterCategory.DIET,
            FilterCategory.HEALTH,
        ]
        assert [len(labels) for _, labels in categories] == [3, 11, 5, 9]

    def test_labels_keep_display_order(self, model):
        """Test labels are returned in their defined order."""
        categories = dict(model.categories())

        assert categories[FilterCategory.MEAL_TYPE] == ("Breakfast", "Lunch", "Dinner")
        assert categories[FilterCategory.DIET][0] == "high-fiber"
        assert categories[FilterCategory.HEALTH][-1] == "vegetarian"

    def test_categories_are_stable(self, model):
        """Test the universe does not change when the selection changes."""
        before = model.categories()
        model.toggle("vegan")
        model.clear()

        assert model.categories() == before

    def test_labels_are_unique_across_categories(self, model):
        """Test no label string is shared between categories."""
        labels = model.all_labels()

        assert len(labels) == len(set(labels)) == 28

    def test_category_headings(self):
        """Test every category has a human heading."""
        assert FilterCategory.MEAL_TYPE.heading == "Meal Type"
        assert FilterCategory.CUISINE_TYPE.heading == "Cuisine Type"
        assert FilterCategory.DIET.heading == "Diet"
        assert FilterCategory.HEALTH.heading == "Health"

    def test_category_of(self):
        """Test labels map back to their owning category."""
        assert category_of("Lunch") == FilterCategory.MEAL_TYPE
        assert category_of("Middle Eastern") == FilterCategory.CUISINE_TYPE
        assert category_of("low-fat") == FilterCategory.DIET
        assert category_of("kosher") == FilterCategory.HEALTH

    def test_category_of_unknown_label(self):
        with pytest.raises(ValueError, match="Unknown filter label"):
            category_of("spicy")


class TestSelection:
    """Tests for toggle / is_selected behaviour."""

    def test_nothing_selected_after_init(self, model):
        """Test every label starts unselected."""
        assert all(not model.is_selected(label) for label in model.all_labels())
        assert len(model) == 0

    @pytest.mark.parametrize("label", [label for labels in FILTER_LABELS.values() for label in labels])
    def test_toggle_twice_restores_state(self, model, label):
        """Test toggle(L); toggle(L) restores is_selected(L)."""
        assert model.toggle(label) is True
        assert model.is_selected(label) is True

        assert model.toggle(label) is False
        assert model.is_selected(label) is False

    def test_double_toggle_restores_selected_label(self, model):
        """Test the involution also holds when the label starts selected."""
        model.toggle("Dinner")
        model.toggle("Dinner")
        model.toggle("Dinner")

        assert model.is_selected("Dinner") is True

    def test_toggle_does_not_affect_other_labels(self, model):
        """Test toggling one label leaves every other label unchanged."""
        model.toggle("paleo")
        snapshot = {label: model.is_selected(label) for label in model.all_labels()}

        model.toggle("Italian")

        for label in model.all_labels():
            if label != "Italian":
                assert model.is_selected(label) == snapshot[label]

    def test_toggle_unknown_label_raises(self, model):
        """Test labels outside the universe are rejected and not stored."""
        with pytest.raises(ValueError):
            model.toggle("not-a-filter")

        assert model.is_selected("not-a-filter") is False
        assert model.selected() == frozenset()

    def test_is_selected_unknown_label_is_false(self, model):
        assert model.is_selected("anything") is False

    def test_selected_snapshot(self, model):
        """Test selected() returns an immutable snapshot."""
        model.toggle("vegan")
        snapshot = model.selected()
        model.toggle("kosher")

        assert snapshot == frozenset({"vegan"})
        assert model.selected() == frozenset({"vegan", "kosher"})

    def test_selected_by_category(self, model):
        """Test grouping keeps universe order and lists every category."""
        model.toggle("vegetarian")
        model.toggle("dairy-free")
        model.toggle("Breakfast")

        grouped = model.selected_by_category()

        assert grouped[FilterCategory.MEAL_TYPE] == ("Breakfast",)
        assert grouped[FilterCategory.CUISINE_TYPE] == ()
        assert grouped[FilterCategory.DIET] == ()
        assert grouped[FilterCategory.HEALTH] == ("dairy-free", "vegetarian")

    def test_clear(self, model):
        model.toggle("Asian")
        model.toggle("low-sodium")

        model.clear()

        assert len(model) == 0
        assert not model.is_selected("Asian")

    def test_models_do_not_share_state(self):
        """Test each session's model owns its own selection."""
        first = FilterSelectionModel()
        second = FilterSelectionModel()

        first.toggle("Mexican")

        assert first.is_selected("Mexican")
        assert not second.is_selected("Mexican")


class TestDisplayName:
    """Tests for display_name() label formatting."""

    @pytest.mark.parametrize(
        "label,expected",
        [
            ("low-carb", "Low Carb"),
            ("vegan", "Vegan"),
            ("gluten-free", "Gluten Free"),
            ("keto-friendly", "Keto Friendly"),
            ("Breakfast", "Breakfast"),
            ("Middle Eastern", "Middle Eastern"),
        ],
    )
    def test_display_name(self, label, expected):
        assert display_name(label) == expected

    def test_rest_of_segment_is_unchanged(self):
        """Test only the first character of each segment changes."""
        assert display_name("mIxEd-cAsE") == "MIxEd CAsE"

    def test_empty_label_is_rejected(self):
        with pytest.raises(ValueError):
            display_name("")

    def test_every_label_formats(self):
        """Test every label in the universe has a display name."""
        for labels in FILTER_LABELS.values():
            for label in labels:
                assert display_name(label)
