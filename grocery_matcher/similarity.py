"""Recipe-to-recipe similarity for "more like this" lists."""

from collections.abc import Iterable

from .models import Recipe

CATEGORY_WEIGHT = 0.4
DIFFICULTY_WEIGHT = 0.1
INGREDIENT_WEIGHT = 0.3
DIETARY_WEIGHT = 0.2


def jaccard(a: set | frozenset, b: set | frozenset) -> float:
    """Jaccard similarity |a ∩ b| / |a ∪ b| (0.0 for two empty sets)."""
    union = a | b
    if not union:
        return 0.0
    return len(a & b) / len(union)


def _ingredient_names(recipe: Recipe) -> set[str]:
    return {ing.name.lower() for ing in recipe.ingredients}


def similarity_score(a: Recipe, b: Recipe) -> float:
    """
    Calculate how similar two recipes are on a 0-1 scale.

    Same category is the strongest signal (0.4), followed by ingredient
    overlap (0.3), dietary tag overlap (0.2) and same difficulty (0.1).
    Overlap terms are skipped when either side has nothing to compare.
    """
    score = 0.0

    if a.category == b.category:
        score += CATEGORY_WEIGHT

    if a.difficulty == b.difficulty:
        score += DIFFICULTY_WEIGHT

    names_a = _ingredient_names(a)
    names_b = _ingredient_names(b)
    if names_a and names_b:
        score += INGREDIENT_WEIGHT * jaccard(names_a, names_b)

    if a.dietary_tags and b.dietary_tags:
        score += DIETARY_WEIGHT * jaccard(a.dietary_tags, b.dietary_tags)

    return min(score, 1.0)


def find_similar(anchor: Recipe, candidates: Iterable[Recipe], limit: int = 5) -> list[Recipe]:
    """
    Find the recipes most similar to an anchor recipe.

    Args:
        anchor: Recipe to compare against (excluded from the result by id)
        candidates: Recipes to score
        limit: Maximum number of recipes to return

    Returns:
        Up to `limit` recipes, most similar first. Equal scores keep their
        candidate order.
    """
    if limit <= 0:
        return []

    scored = [
        (candidate, similarity_score(anchor, candidate))
        for candidate in candidates
        if candidate.id != anchor.id
    ]
    # sorted() is stable with reverse=True, so ties keep candidate order
    scored.sort(key=lambda pair: pair[1], reverse=True)
    return [recipe for recipe, _ in scored[:limit]]
