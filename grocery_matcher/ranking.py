"""Recipe ranking: score recipes against available ingredients, sort, and tier.

Two entry points exist for the two ways the app asks for matches:

- refresh_matches(): the shopping list changed; score by plain coverage and
  order by score, then by fewest missing ingredients.
- suggest_recipes(): the user typed a list of ingredients; score with the
  boosted suggestion score and group scores within 0.1 of a group's best
  score, so fewer missing ingredients wins among close matches.

Every function returns new annotated Recipe copies; input recipes are never
modified.
"""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Callable

from .matcher import (
    AvailableItems,
    blended_score,
    boosted_score,
    coverage_score,
    missing_ingredients,
)
from .models import Recipe

if TYPE_CHECKING:
    from .index import RecipeIndex

logger = logging.getLogger(__name__)

DEFAULT_TIE_WINDOW = 0.1


class ScoreMode(str, Enum):
    """Which match score a ranking run uses."""

    COVERAGE = "coverage"
    BLENDED = "blended"
    BOOSTED = "boosted"


SCORERS: dict[ScoreMode, Callable[[Recipe, AvailableItems], float]] = {
    ScoreMode.COVERAGE: coverage_score,
    ScoreMode.BLENDED: blended_score,
    ScoreMode.BOOSTED: boosted_score,
}


class Tier(str, Enum):
    """Named score buckets used to group ranked recipes."""

    COOK_TONIGHT = "Cook Tonight"
    ALMOST_THERE = "Almost There"
    WORTH_EXPLORING = "Worth Exploring"


@dataclass(frozen=True)
class TierBoundaries:
    """
    Lower score bounds (inclusive) of each tier.

    Defaults: Cook Tonight >= 0.7, Almost There >= 0.4, Worth Exploring
    >= 0.0. Recipes below worth_exploring are left out of every tier.
    """

    cook_tonight: float = 0.7
    almost_there: float = 0.4
    worth_exploring: float = 0.0

    def __post_init__(self) -> None:
        if not 0.0 <= self.worth_exploring <= self.almost_there <= self.cook_tonight <= 1.0:
            raise ValueError(
                "Tier boundaries must satisfy 0 <= worth_exploring <= almost_there "
                f"<= cook_tonight <= 1, got {self.worth_exploring}, "
                f"{self.almost_there}, {self.cook_tonight}"
            )

    def tier_for(self, score: float) -> Tier | None:
        """Get the tier a score falls into, or None below the lowest bound."""
        if score >= self.cook_tonight:
            return Tier.COOK_TONIGHT
        if score >= self.almost_there:
            return Tier.ALMOST_THERE
        if score >= self.worth_exploring:
            return Tier.WORTH_EXPLORING
        return None


@dataclass
class TieredRecipes:
    """Ranked recipes grouped by tier, each group in ranked order."""

    cook_tonight: list[Recipe] = field(default_factory=list)
    almost_there: list[Recipe] = field(default_factory=list)
    worth_exploring: list[Recipe] = field(default_factory=list)

    def get(self, tier: Tier) -> list[Recipe]:
        return {
            Tier.COOK_TONIGHT: self.cook_tonight,
            Tier.ALMOST_THERE: self.almost_there,
            Tier.WORTH_EXPLORING: self.worth_exploring,
        }[tier]

    def items(self) -> list[tuple[Tier, list[Recipe]]]:
        """Tiers with their recipes, best tier first."""
        return [(tier, self.get(tier)) for tier in Tier]

    @property
    def total(self) -> int:
        return len(self.cook_tonight) + len(self.almost_there) + len(self.worth_exploring)


def score_recipe(
    recipe: Recipe, available: AvailableItems, mode: ScoreMode = ScoreMode.BLENDED
) -> Recipe:
    """Return a copy of the recipe annotated with its score and missing ingredients."""
    score = SCORERS[mode](recipe, available)
    return recipe.with_match(score, missing_ingredients(recipe, available))


def _missing_count(recipe: Recipe) -> int:
    return len(recipe.missing_ingredients)


def sort_ranked(recipes: Iterable[Recipe], tie_window: float = 0.0) -> list[Recipe]:
    """
    Sort scored recipes best first.

    Recipes are sorted by descending score, then split into tie groups: a
    group starts at its highest-scoring recipe and takes every following
    recipe scoring within `tie_window` of it. Each group is ordered by
    ascending missing-ingredient count. With a window of 0.0 only equal
    scores tie. Remaining ties keep their input order.

    Two recipes more than `tie_window` apart never swap, however many close
    scores lie between them.
    """
    by_score = sorted(recipes, key=lambda recipe: recipe.match_score, reverse=True)

    ordered: list[Recipe] = []
    start = 0
    while start < len(by_score):
        top = by_score[start].match_score
        end = start + 1
        while end < len(by_score) and top - by_score[end].match_score <= tie_window:
            end += 1
        ordered.extend(sorted(by_score[start:end], key=_missing_count))
        start = end
    return ordered


def rank(
    recipes: Iterable[Recipe],
    available: AvailableItems,
    mode: ScoreMode = ScoreMode.BLENDED,
    tie_window: float = 0.0,
) -> list[Recipe]:
    """
    Score and sort recipes against the available ingredients.

    Args:
        recipes: Recipes to rank
        available: Ingredients or names the user has
        mode: Score variant to use
        tie_window: Score difference treated as a tie (see sort_ranked)

    Returns:
        Annotated recipe copies, best match first
    """
    scored = [score_recipe(recipe, available, mode) for recipe in recipes]
    logger.debug(
        "Ranked %d recipes against %d items (mode=%s, tie_window=%s)",
        len(scored),
        len(available),
        mode.value,
        tie_window,
    )
    return sort_ranked(scored, tie_window)


def refresh_matches(recipes: Iterable[Recipe], shopping_items: AvailableItems) -> list[Recipe]:
    """
    Rank recipes against the current shopping list.

    Uses plain coverage, so the score reads as "share of this recipe you
    have". Only exactly equal scores are broken by missing count.
    """
    return rank(recipes, shopping_items, mode=ScoreMode.COVERAGE, tie_window=0.0)


def suggest_recipes(
    recipes: Iterable[Recipe],
    ingredients: AvailableItems,
    tie_window: float = DEFAULT_TIE_WINDOW,
    limit: int | None = None,
) -> list[Recipe]:
    """
    Suggest recipes for a list of ingredients the user entered.

    Uses the boosted suggestion score and a fuzzy tie window. Recipes that
    use none of the ingredients are dropped.

    Args:
        recipes: Recipes to choose from
        ingredients: Ingredients or raw ingredient names
        tie_window: Score difference treated as a tie
        limit: Maximum number of suggestions (None for all)

    Returns:
        Annotated recipe copies, best suggestion first
    """
    ranked = rank(recipes, ingredients, mode=ScoreMode.BOOSTED, tie_window=tie_window)
    suggestions = [recipe for recipe in ranked if recipe.match_score > 0]
    if limit is not None:
        suggestions = suggestions[: max(limit, 0)]
    return suggestions


def partition_tiers(
    ranked: Sequence[Recipe], boundaries: TierBoundaries | None = None
) -> TieredRecipes:
    """Group ranked recipes into tiers by their match score."""
    if boundaries is None:
        boundaries = TierBoundaries()

    tiers = TieredRecipes()
    for recipe in ranked:
        tier = boundaries.tier_for(recipe.match_score)
        if tier is not None:
            tiers.get(tier).append(recipe)
    return tiers


@dataclass
class RankingPipeline:
    """
    Ranking with its configuration injected rather than hard-coded.

    Owns the tier boundaries and the suggestion tie window; an optional
    RecipeIndex supplies the recipe set when none is passed in.
    """

    boundaries: TierBoundaries = field(default_factory=TierBoundaries)
    tie_window: float = DEFAULT_TIE_WINDOW
    index: "RecipeIndex | None" = None

    @classmethod
    def from_config(cls, index: "RecipeIndex | None" = None) -> "RankingPipeline":
        """Build a pipeline from environment configuration."""
        from .config import get_tie_window, get_tier_boundaries

        return cls(boundaries=get_tier_boundaries(), tie_window=get_tie_window(), index=index)

    def _recipes(self, recipes: Iterable[Recipe] | None) -> list[Recipe]:
        if recipes is not None:
            return list(recipes)
        if self.index is not None:
            return self.index.recipes
        return []

    def refresh(
        self, shopping_items: AvailableItems, recipes: Iterable[Recipe] | None = None
    ) -> list[Recipe]:
        return refresh_matches(self._recipes(recipes), shopping_items)

    def suggest(
        self,
        ingredients: AvailableItems,
        recipes: Iterable[Recipe] | None = None,
        limit: int | None = None,
    ) -> list[Recipe]:
        return suggest_recipes(
            self._recipes(recipes), ingredients, tie_window=self.tie_window, limit=limit
        )

    def tiers(self, ranked: Sequence[Recipe]) -> TieredRecipes:
        return partition_tiers(ranked, self.boundaries)
