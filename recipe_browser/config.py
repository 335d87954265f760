"""
Configuration management for the Recipe Browser.

This module centralizes environment variable loading from the .env file at the
project root. It is imported by the Streamlit entry point before anything else
reads the environment.

When no .env file exists, load_dotenv() is a no-op and process environment
variables are used as-is.

Environment Variables:
- RECIPE_SERVICE_URL: Optional, base URL of the recipe service (defaults to http://localhost:4567)
- RECIPE_SERVICE_TIMEOUT: Optional, request timeout in seconds (defaults to 10)
- RECIPE_BROWSER_LOG_LEVEL: Optional, log level name (defaults to INFO)
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_SERVICE_URL = "http://localhost:4567"
DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_LOG_LEVEL = "INFO"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def load_env_file() -> None:
    """
    Load environment variables from .env file at project root.

    Safe to call multiple times. Existing environment variables take precedence
    over values in the file.
    """
    # recipe_browser/config.py -> recipe_browser/ -> project root
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env", override=False)


# Load .env file on module import
load_env_file()


class RecipeServiceConfig:
    """Configuration for the remote recipe service."""

    @staticmethod
    def get_base_url() -> str:
        """
        Get the recipe service base URL.

        Returns:
            URL string with trailing slash removed (default: "http://localhost:4567")
        """
        return os.getenv("RECIPE_SERVICE_URL", DEFAULT_SERVICE_URL).rstrip("/")

    @staticmethod
    def get_timeout() -> float:
        """
        Get the request timeout in seconds.

        Raises:
            RuntimeError: If RECIPE_SERVICE_TIMEOUT is set but is not a positive number
        """
        raw = os.getenv("RECIPE_SERVICE_TIMEOUT")
        if raw is None or raw.strip() == "":
            return DEFAULT_TIMEOUT_SECONDS
        try:
            timeout = float(raw)
        except ValueError:
            raise RuntimeError(f"RECIPE_SERVICE_TIMEOUT must be a number of seconds, got {raw!r}") from None
        if timeout <= 0:
            raise RuntimeError(f"RECIPE_SERVICE_TIMEOUT must be positive, got {raw!r}")
        return timeout


def get_log_level() -> int:
    """
    Resolve RECIPE_BROWSER_LOG_LEVEL to a logging level.

    Unknown level names fall back to INFO.
    """
    name = os.getenv("RECIPE_BROWSER_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def configure_logging() -> None:
    """Configure root logging for the app. Has no effect if logging is already configured."""
    logging.basicConfig(level=get_log_level(), format=LOG_FORMAT)
