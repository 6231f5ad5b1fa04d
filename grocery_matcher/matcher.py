"""Ingredient name matching and recipe match scoring.

A recipe ingredient is "available" when its name matches any name in the
user's ingredient list (shopping list, pantry, or free-text input). Three
score variants are built on top of that and are NOT interchangeable:

- coverage_score: fraction of the recipe that is available.
- blended_score: coverage weighted with how much of the user's list the
  recipe uses.
- boosted_score: coverage with a presentation boost for suggestions, where
  only a perfect match may reach 1.0.
"""

from collections.abc import Iterable, Sequence

from .models import Ingredient, Recipe

# Shared words and contained names must be longer than this ("oil", "egg" never anchor)
MIN_ANCHOR_LENGTH = 3

COVERAGE_WEIGHT = 0.7
UTILIZATION_WEIGHT = 0.3

SUGGESTION_BOOST = 1.2
MAX_IMPERFECT_SCORE = 0.99

AvailableItems = Sequence[Ingredient | str]


def normalize_name(name: str) -> str:
    """Normalize an ingredient name for matching."""
    return name.strip().lower()


def names_match(candidate: str, target: str) -> bool:
    """
    Check whether two free-text ingredient names denote the same ingredient.

    Rules, first hit wins:
    1. Exact match after normalization ("Milk" == " milk").
    2. Shared word longer than 3 characters ("chicken breast" / "whole chicken").
    3. One name contains the other, and the contained name is longer than
       3 characters ("olive oil" contains "olive"; "eggs" does not match "egg").

    No stemming and no edit distance.

    Args:
        candidate: Name being looked up (usually a recipe ingredient)
        target: Name it is compared against (usually an available item)

    Returns:
        True if the names match
    """
    candidate = normalize_name(candidate)
    target = normalize_name(target)

    if candidate == target:
        return True

    target_words = set(target.split(" "))
    for word in candidate.split(" "):
        if len(word) > MIN_ANCHOR_LENGTH and word in target_words:
            return True

    if target in candidate and len(target) > MIN_ANCHOR_LENGTH:
        return True
    if candidate in target and len(candidate) > MIN_ANCHOR_LENGTH:
        return True

    return False


def _item_name(item: Ingredient | str) -> str:
    return item if isinstance(item, str) else item.name


def _available_names(available: Iterable[Ingredient | str]) -> list[str]:
    return [_item_name(item) for item in available]


def is_available(name: str, available: Iterable[Ingredient | str]) -> bool:
    """Check if an ingredient name matches any available item."""
    return any(names_match(name, other) for other in _available_names(available))


def coverage_score(recipe: Recipe, available: AvailableItems) -> float:
    """
    Fraction of the recipe's ingredients that are available.

    Returns 0.0 for a recipe without ingredients.
    """
    if not recipe.ingredients:
        return 0.0

    names = _available_names(available)
    matched = sum(1 for ing in recipe.ingredients if is_available(ing.name, names))
    return matched / len(recipe.ingredients)


def utilization_score(recipe: Recipe, available: AvailableItems) -> float:
    """
    Fraction of the available items that the recipe uses.

    Returns 0.0 when nothing is available.
    """
    names = _available_names(available)
    if not names:
        return 0.0

    used = sum(
        1 for name in names if any(names_match(ing.name, name) for ing in recipe.ingredients)
    )
    return used / len(names)


def blended_score(recipe: Recipe, available: AvailableItems) -> float:
    """
    Weighted combination of coverage (70%) and utilization (30%).

    Favors recipes that are mostly covered and also use up the user's list.
    """
    coverage = coverage_score(recipe, available)
    utilization = utilization_score(recipe, available)
    return COVERAGE_WEIGHT * coverage + UTILIZATION_WEIGHT * utilization


def boosted_score(recipe: Recipe, available: AvailableItems) -> float:
    """
    Coverage with a 20% boost, used for ranked suggestions.

    A fully covered recipe scores exactly 1.0. Anything less is capped at
    0.99 so a partial match never presents as perfect.
    """
    coverage = coverage_score(recipe, available)
    if coverage >= 1.0:
        return 1.0
    return min(MAX_IMPERFECT_SCORE, coverage * SUGGESTION_BOOST)


def missing_ingredients(recipe: Recipe, available: AvailableItems) -> list[Ingredient]:
    """
    Get the recipe ingredients not covered by the available items.

    Args:
        recipe: Recipe to check
        available: Ingredients or names the user has

    Returns:
        Missing ingredients in the recipe's original order
    """
    names = _available_names(available)
    return [ing for ing in recipe.ingredients if not is_available(ing.name, names)]
