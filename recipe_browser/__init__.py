"""
Core modules for the Recipe Browser.

This package contains:
- filters: Filter label universe, selection model and label formatting
- models: RecipeResult and response decoding
- client: Async HTTP client for the recipe service
- search: Search lifecycle controller
- config: Environment configuration and logging setup
"""

from recipe_browser.exceptions import RecipeBrowserError, SearchFailed
from recipe_browser.filters import FilterCategory, FilterSelectionModel, display_name
from recipe_browser.models import RecipeResult
from recipe_browser.search import RecipeSearchController

__all__ = [
    "RecipeBrowserError",
    "SearchFailed",
    "FilterCategory",
    "FilterSelectionModel",
    "display_name",
    "RecipeResult",
    "RecipeSearchController",
]
