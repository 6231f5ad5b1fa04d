"""Grocery Matcher - rank recipes against the ingredients you have."""

__version__ = "1.0.0"

from .filters import ALL, RecipeFilter, apply_filter, apply_filters, search_recipes
from .index import RecipeIndex
from .matcher import (
    blended_score,
    boosted_score,
    coverage_score,
    missing_ingredients,
    names_match,
)
from .models import (
    DietaryTag,
    Difficulty,
    Ingredient,
    IngredientCategory,
    NutritionInfo,
    Recipe,
    RecipeCategory,
)
from .ranking import (
    RankingPipeline,
    ScoreMode,
    Tier,
    TierBoundaries,
    partition_tiers,
    rank,
    refresh_matches,
    suggest_recipes,
)
from .similarity import find_similar, similarity_score
from .units import Unit

__all__ = [
    "Ingredient",
    "Recipe",
    "NutritionInfo",
    "Unit",
    "IngredientCategory",
    "RecipeCategory",
    "Difficulty",
    "DietaryTag",
    "names_match",
    "coverage_score",
    "blended_score",
    "boosted_score",
    "missing_ingredients",
    "similarity_score",
    "find_similar",
    "RecipeIndex",
    "RankingPipeline",
    "ScoreMode",
    "Tier",
    "TierBoundaries",
    "rank",
    "refresh_matches",
    "suggest_recipes",
    "partition_tiers",
    "RecipeFilter",
    "ALL",
    "apply_filter",
    "apply_filters",
    "search_recipes",
]
