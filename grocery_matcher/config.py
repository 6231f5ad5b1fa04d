"""Configuration and logging setup for Grocery Matcher."""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

from .ranking import DEFAULT_TIE_WINDOW, TierBoundaries

# Load environment variables from .env file
load_dotenv()

# App directories
APP_NAME = "grocery-matcher"
CONFIG_DIR = Path.home() / f".{APP_NAME}"
RECIPES_FILE = CONFIG_DIR / "recipes.json"

# Environment variables
RECIPES_ENV = "GROCERY_MATCHER_RECIPES"
COOK_TONIGHT_ENV = "GROCERY_MATCHER_COOK_TONIGHT"
ALMOST_THERE_ENV = "GROCERY_MATCHER_ALMOST_THERE"
WORTH_EXPLORING_ENV = "GROCERY_MATCHER_WORTH_EXPLORING"
TIE_WINDOW_ENV = "GROCERY_MATCHER_TIE_WINDOW"
LOG_LEVEL_ENV = "GROCERY_MATCHER_LOG_LEVEL"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class ConfigError(Exception):
    """Exception raised for invalid configuration values."""

    pass


def _get_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except ValueError as e:
        raise ConfigError(f"{name} must be a number, got {value!r}") from e


def get_recipes_file() -> Path:
    """Get the recipe store path from the environment or the default location."""
    path = os.getenv(RECIPES_ENV)
    if path:
        return Path(path).expanduser()
    return RECIPES_FILE


def get_tier_boundaries() -> TierBoundaries:
    """
    Get tier boundaries, with per-tier overrides from the environment.

    Raises:
        ConfigError: If a value is not a number or the bounds are out of order
    """
    defaults = TierBoundaries()
    try:
        return TierBoundaries(
            cook_tonight=_get_float(COOK_TONIGHT_ENV, defaults.cook_tonight),
            almost_there=_get_float(ALMOST_THERE_ENV, defaults.almost_there),
            worth_exploring=_get_float(WORTH_EXPLORING_ENV, defaults.worth_exploring),
        )
    except ValueError as e:
        raise ConfigError(str(e)) from e


def get_tie_window() -> float:
    """Get the score window treated as a tie when ranking suggestions."""
    window = _get_float(TIE_WINDOW_ENV, DEFAULT_TIE_WINDOW)
    if window < 0:
        raise ConfigError(f"{TIE_WINDOW_ENV} must not be negative, got {window}")
    return window


def get_log_level() -> str:
    """Get the log level name (default WARNING)."""
    return os.getenv(LOG_LEVEL_ENV, "WARNING").upper()


def configure_logging(level: str | int | None = None) -> None:
    """Configure root logging for command-line use."""
    if level is None:
        level = get_log_level()
    if isinstance(level, str):
        name = level.upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ConfigError(f"Unknown log level: {name}")
    logging.basicConfig(level=level, format=LOG_FORMAT)
