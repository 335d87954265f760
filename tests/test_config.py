"""
Tests for environment configuration and logging setup.
"""

import logging
import os
from unittest.mock import patch

import pytest

from recipe_browser.config import (
    DEFAULT_SERVICE_URL,
    DEFAULT_TIMEOUT_SECONDS,
    RecipeServiceConfig,
    configure_logging,
    get_log_level,
)


class TestRecipeServiceConfig:
    """Tests for RecipeServiceConfig getters."""

    @patch.dict(os.environ, {}, clear=True)
    def test_defaults(self):
        assert RecipeServiceConfig.get_base_url() == DEFAULT_SERVICE_URL == "http://localhost:4567"
        assert RecipeServiceConfig.get_timeout() == DEFAULT_TIMEOUT_SECONDS

    @patch.dict(os.environ, {"RECIPE_SERVICE_URL": "https://recipes.example.com///"})
    def test_base_url_strips_trailing_slashes(self):
        assert RecipeServiceConfig.get_base_url() == "https://recipes.example.com"

    @patch.dict(os.environ, {"RECIPE_SERVICE_TIMEOUT": "30"})
    def test_timeout_override(self):
        assert RecipeServiceConfig.get_timeout() == 30.0

    @patch.dict(os.environ, {"RECIPE_SERVICE_TIMEOUT": ""})
    def test_blank_timeout_uses_default(self):
        assert RecipeServiceConfig.get_timeout() == DEFAULT_TIMEOUT_SECONDS

    @patch.dict(os.environ, {"RECIPE_SERVICE_TIMEOUT": "soon"})
    def test_invalid_timeout(self):
        with pytest.raises(RuntimeError, match="RECIPE_SERVICE_TIMEOUT must be a number"):
            RecipeServiceConfig.get_timeout()

    @patch.dict(os.environ, {"RECIPE_SERVICE_TIMEOUT": "-1"})
    def test_non_positive_timeout(self):
        with pytest.raises(RuntimeError, match="must be positive"):
            RecipeServiceConfig.get_timeout()


class TestLogging:
    """Tests for log level resolution."""

    @patch.dict(os.environ, {}, clear=True)
    def test_default_level(self):
        assert get_log_level() == logging.INFO

    @patch.dict(os.environ, {"RECIPE_BROWSER_LOG_LEVEL": "debug"})
    def test_level_name_is_case_insensitive(self):
        assert get_log_level() == logging.DEBUG

    @patch.dict(os.environ, {"RECIPE_BROWSER_LOG_LEVEL": "chatty"})
    def test_unknown_level_falls_back_to_info(self):
        assert get_log_level() == logging.INFO

    @patch.dict(os.environ, {"RECIPE_BROWSER_LOG_LEVEL": "WARNING"})
    def test_configure_logging_uses_level(self):
        with patch("recipe_browser.config.logging.basicConfig") as mock_basic_config:
            configure_logging()

        mock_basic_config.assert_called_once()
        assert mock_basic_config.call_args.kwargs["level"] == logging.WARNING
