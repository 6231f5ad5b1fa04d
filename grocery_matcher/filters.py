"""Declarative recipe filters: category, diet, time, difficulty and text search."""

from collections.abc import Iterable
from dataclasses import dataclass

from .models import DietaryTag, Difficulty, Recipe, RecipeCategory


@dataclass(frozen=True)
class RecipeFilter:
    """
    A set of recipe predicates combined with AND.

    Unset fields do not constrain anything, so RecipeFilter() matches every
    recipe.
    """

    category: RecipeCategory | None = None
    dietary_tag: DietaryTag | None = None
    max_time: int | None = None  # minutes
    difficulty: Difficulty | None = None
    query: str | None = None

    @property
    def is_noop(self) -> bool:
        return (
            self.category is None
            and self.dietary_tag is None
            and self.max_time is None
            and self.difficulty is None
            and not (self.query and self.query.strip())
        )

    def matches(self, recipe: Recipe) -> bool:
        """Check if a recipe passes every predicate of this filter."""
        if self.category is not None and recipe.category != self.category:
            return False
        if self.dietary_tag is not None and self.dietary_tag not in recipe.dietary_tags:
            return False
        if self.max_time is not None and recipe.time_minutes > self.max_time:
            return False
        if self.difficulty is not None and recipe.difficulty != self.difficulty:
            return False
        if self.query and not matches_search(recipe, self.query):
            return False
        return True


ALL = RecipeFilter()


def searchable_text(recipe: Recipe) -> str:
    """Lowercased text a search query is matched against."""
    parts = [recipe.name, recipe.category.value, recipe.difficulty.value]
    parts.extend(sorted(tag.value for tag in recipe.dietary_tags))
    return " ".join(parts).lower()


def matches_search(recipe: Recipe, query: str) -> bool:
    """
    Check if every term of a search query appears in the recipe.

    Terms are whitespace-separated and matched as substrings of the recipe's
    name, category, difficulty and dietary tags. A blank query matches.
    """
    text = searchable_text(recipe)
    return all(term in text for term in query.lower().split())


def search_recipes(recipes: Iterable[Recipe], query: str) -> list[Recipe]:
    """Get the recipes matching a free-text search query, in input order."""
    return [recipe for recipe in recipes if matches_search(recipe, query)]


def apply_filter(recipes: Iterable[Recipe], recipe_filter: RecipeFilter = ALL) -> list[Recipe]:
    """
    Apply a filter to recipes, keeping input order.

    The no-op filter returns every recipe unchanged.
    """
    if recipe_filter.is_noop:
        return list(recipes)
    return [recipe for recipe in recipes if recipe_filter.matches(recipe)]


def apply_filters(recipes: Iterable[Recipe], *filters: RecipeFilter) -> list[Recipe]:
    """Apply several filters in sequence (a recipe must pass all of them)."""
    result = list(recipes)
    for recipe_filter in filters:
        result = apply_filter(result, recipe_filter)
    return result
