"""In-memory recipe index with lookups by id, category and difficulty."""

import logging
from collections.abc import Iterable, Iterator

from .filters import search_recipes
from .models import Difficulty, Recipe, RecipeCategory

logger = logging.getLogger(__name__)


class RecipeIndex:
    """
    A recipe collection with cached lookups by id, category and difficulty.

    The index owns the collection: insert(), remove() and rebuild_all() are
    the only ways to change it, and each one patches every lookup map so the
    maps always reflect the current collection. Buckets keep collection
    order. Recipes are immutable, so stored entries cannot go stale.
    """

    def __init__(self, recipes: Iterable[Recipe] = ()) -> None:
        self._recipes: dict[str, Recipe] = {}
        self._by_category: dict[RecipeCategory, list[Recipe]] = {}
        self._by_difficulty: dict[Difficulty, list[Recipe]] = {}
        self.rebuild_all(recipes)

    def __len__(self) -> int:
        return len(self._recipes)

    def __contains__(self, recipe_id: object) -> bool:
        if isinstance(recipe_id, Recipe):
            recipe_id = recipe_id.id
        return recipe_id in self._recipes

    def __iter__(self) -> Iterator[Recipe]:
        return iter(list(self._recipes.values()))

    @property
    def recipes(self) -> list[Recipe]:
        """All recipes in collection order."""
        return list(self._recipes.values())

    def by_id(self, recipe_id: str) -> Recipe | None:
        return self._recipes.get(recipe_id)

    def by_category(self, category: RecipeCategory) -> list[Recipe]:
        return list(self._by_category.get(category, []))

    def by_difficulty(self, difficulty: Difficulty) -> list[Recipe]:
        return list(self._by_difficulty.get(difficulty, []))

    def search(self, query: str) -> list[Recipe]:
        """Free-text search over the indexed recipes."""
        return search_recipes(self._recipes.values(), query)

    def rebuild_all(self, recipes: Iterable[Recipe]) -> None:
        """Replace the whole collection and rebuild every lookup in one pass."""
        self._recipes.clear()
        self._by_category.clear()
        self._by_difficulty.clear()

        # A repeated id keeps its first position and its last value
        for recipe in recipes:
            self._recipes[recipe.id] = recipe

        for recipe in self._recipes.values():
            self._by_category.setdefault(recipe.category, []).append(recipe)
            self._by_difficulty.setdefault(recipe.difficulty, []).append(recipe)

        logger.debug("Rebuilt recipe index with %d recipes", len(self._recipes))

    def insert(self, recipe: Recipe) -> None:
        """
        Add a recipe, or replace the stored recipe with the same id.

        A replaced recipe keeps its position in the collection. Only the
        buckets it leaves or joins are touched.
        """
        previous = self._recipes.get(recipe.id)
        self._recipes[recipe.id] = recipe

        if previous is None:
            self._by_category.setdefault(recipe.category, []).append(recipe)
            self._by_difficulty.setdefault(recipe.difficulty, []).append(recipe)
            return

        if previous.category == recipe.category:
            _replace_in_bucket(self._by_category[recipe.category], recipe)
        else:
            _drop_from_bucket(self._by_category, previous.category, recipe.id)
            self._rebuild_bucket(self._by_category, recipe.category, "category")

        if previous.difficulty == recipe.difficulty:
            _replace_in_bucket(self._by_difficulty[recipe.difficulty], recipe)
        else:
            _drop_from_bucket(self._by_difficulty, previous.difficulty, recipe.id)
            self._rebuild_bucket(self._by_difficulty, recipe.difficulty, "difficulty")

    def remove(self, recipe: Recipe | str) -> bool:
        """
        Remove a recipe (or recipe id) from the index.

        Returns:
            True if the recipe was present
        """
        recipe_id = recipe.id if isinstance(recipe, Recipe) else recipe
        previous = self._recipes.pop(recipe_id, None)
        if previous is None:
            return False

        _drop_from_bucket(self._by_category, previous.category, recipe_id)
        _drop_from_bucket(self._by_difficulty, previous.difficulty, recipe_id)
        return True

    def _rebuild_bucket(self, buckets: dict, key: RecipeCategory | Difficulty, attr: str) -> None:
        # A recipe moving into an existing bucket must land at its collection position
        buckets[key] = [r for r in self._recipes.values() if getattr(r, attr) == key]


def _replace_in_bucket(bucket: list[Recipe], recipe: Recipe) -> None:
    for i, existing in enumerate(bucket):
        if existing.id == recipe.id:
            bucket[i] = recipe
            return


def _drop_from_bucket(buckets: dict, key: RecipeCategory | Difficulty, recipe_id: str) -> None:
    bucket = buckets.get(key)
    if bucket is None:
        return
    bucket[:] = [r for r in bucket if r.id != recipe_id]
    if not bucket:
        del buckets[key]
