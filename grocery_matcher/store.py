"""JSON recipe store used to feed the engine from the command line."""

import json
import logging
from pathlib import Path
from typing import Any

from .models import Recipe

logger = logging.getLogger(__name__)


class RecipeStoreError(Exception):
    """Exception raised for recipe store errors."""

    pass


def _read_records(path: Path) -> list[dict[str, Any]]:
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise RecipeStoreError(f"Failed to load recipes from {path}: {e}") from e

    # Accept a bare list or {"recipes": [...]}
    if isinstance(data, dict):
        data = data.get("recipes", [])
    if not isinstance(data, list):
        raise RecipeStoreError(f"Expected a list of recipes in {path}")
    return data


def load_recipes(path: Path) -> list[Recipe]:
    """
    Load recipes from a JSON file.

    Args:
        path: File holding a list of recipe objects

    Returns:
        Recipes in file order

    Raises:
        RecipeStoreError: If the file cannot be read or a record is malformed
    """
    recipes = []
    for position, record in enumerate(_read_records(path), 1):
        try:
            recipes.append(Recipe.from_dict(record))
        except (KeyError, ValueError, TypeError, AttributeError) as e:
            raise RecipeStoreError(f"Invalid recipe #{position} in {path}: {e!r}") from e

    logger.debug("Loaded %d recipes from %s", len(recipes), path)
    return recipes


def save_recipes(recipes: list[Recipe], path: Path) -> None:
    """Save recipes to a JSON file (match scores are not stored)."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump([recipe.to_dict() for recipe in recipes], f, indent=2, ensure_ascii=False)
    except OSError as e:
        raise RecipeStoreError(f"Failed to save recipes to {path}: {e}") from e
