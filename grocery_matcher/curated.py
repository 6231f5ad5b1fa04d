"""Curated recipe collections ("Quick Weeknight Meals", "Comfort Food", ...)."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from .models import DietaryTag, Recipe, RecipeCategory

QUICK_MEAL_MINUTES = 30
LOW_CALORIE_LIMIT = 500

HEALTHY_TAGS = {
    DietaryTag.VEGETARIAN,
    DietaryTag.VEGAN,
    DietaryTag.GLUTEN_FREE,
    DietaryTag.LOW_CARB,
}

BREAKFAST_KEYWORDS = ["breakfast", "pancake", "waffle", "egg", "muffin", "toast"]
COMFORT_KEYWORDS = ["pasta", "soup", "stew", "casserole", "mac", "cheese", "pot pie", "pizza"]
DESSERT_KEYWORDS = ["dessert", "cake", "cookie", "pie", "ice cream", "sweet", "chocolate"]
PARTY_KEYWORDS = ["dip", "finger food", "nachos", "wings", "bite"]


@dataclass(frozen=True)
class RecipeCollection:
    """A themed recipe collection, filled by explicit ids or by its name's rule."""

    name: str
    description: str
    recipe_ids: tuple[str, ...] = ()
    featured: bool = False
    emoji: str = "🍽️"


@dataclass
class PopulatedCollection:
    """A collection together with the recipes currently in it."""

    collection: RecipeCollection
    recipes: list[Recipe] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.collection.name


SAMPLE_COLLECTIONS: list[RecipeCollection] = [
    RecipeCollection(
        name="Quick Weeknight Meals",
        description="Dinner on the table in 30 minutes or less",
        featured=True,
        emoji="⏱️",
    ),
    RecipeCollection(
        name="Healthy Options",
        description="Nutritious and delicious recipes",
        emoji="🥗",
    ),
    RecipeCollection(
        name="Breakfast Favorites",
        description="Start your day right with these delicious breakfast recipes",
        emoji="🍳",
    ),
    RecipeCollection(
        name="Vegetarian Dishes",
        description="Flavorful meat-free meals everyone will enjoy",
        emoji="🥬",
    ),
    RecipeCollection(
        name="Comfort Food",
        description="Hearty, satisfying recipes for when you need some comfort",
        emoji="🍲",
    ),
    RecipeCollection(
        name="Desserts & Treats",
        description="Indulgent sweets to satisfy your cravings",
        emoji="🍰",
    ),
    RecipeCollection(
        name="Party Favorites",
        description="Crowd-pleasing recipes perfect for entertaining",
        emoji="🎉",
    ),
]


def _name_has_any(recipe: Recipe, keywords: list[str]) -> bool:
    name = recipe.name.lower()
    return any(keyword in name for keyword in keywords)


def _is_quick(recipe: Recipe) -> bool:
    return recipe.time_minutes <= QUICK_MEAL_MINUTES


def _is_healthy(recipe: Recipe) -> bool:
    # Recipes without nutrition info only qualify through their tags
    is_low_calorie = (
        recipe.nutrition is not None and recipe.nutrition.calories < LOW_CALORIE_LIMIT
    )
    return is_low_calorie or bool(recipe.dietary_tags & HEALTHY_TAGS)


def _is_breakfast(recipe: Recipe) -> bool:
    return recipe.category == RecipeCategory.BREAKFAST or _name_has_any(
        recipe, BREAKFAST_KEYWORDS
    )


def _is_vegetarian(recipe: Recipe) -> bool:
    return bool(recipe.dietary_tags & {DietaryTag.VEGETARIAN, DietaryTag.VEGAN})


def _is_comfort(recipe: Recipe) -> bool:
    return _name_has_any(recipe, COMFORT_KEYWORDS)


def _is_dessert(recipe: Recipe) -> bool:
    return recipe.category == RecipeCategory.DESSERT or _name_has_any(recipe, DESSERT_KEYWORDS)


def _is_party(recipe: Recipe) -> bool:
    return recipe.category in (RecipeCategory.APPETIZER, RecipeCategory.SNACK) or _name_has_any(
        recipe, PARTY_KEYWORDS
    )


COLLECTION_RULES: dict[str, Callable[[Recipe], bool]] = {
    "Quick Weeknight Meals": _is_quick,
    "Healthy Options": _is_healthy,
    "Breakfast Favorites": _is_breakfast,
    "Vegetarian Dishes": _is_vegetarian,
    "Comfort Food": _is_comfort,
    "Desserts & Treats": _is_dessert,
    "Party Favorites": _is_party,
}


def find_recipes_for_collection(
    collection: RecipeCollection, recipes: Iterable[Recipe]
) -> list[Recipe]:
    """
    Find the recipes that belong in a collection.

    Explicit recipe ids take precedence; otherwise the rule registered for
    the collection's name is applied. Collections without a rule are empty.
    """
    if collection.recipe_ids:
        wanted = set(collection.recipe_ids)
        return [recipe for recipe in recipes if recipe.id in wanted]

    rule = COLLECTION_RULES.get(collection.name)
    if rule is None:
        return []
    return [recipe for recipe in recipes if rule(recipe)]


def populate_collections(
    recipes: Iterable[Recipe],
    collections: list[RecipeCollection] | None = None,
) -> list[PopulatedCollection]:
    """Fill each collection (the sample collections by default) from a recipe set."""
    if collections is None:
        collections = SAMPLE_COLLECTIONS

    recipe_list = list(recipes)
    return [
        PopulatedCollection(collection, find_recipes_for_collection(collection, recipe_list))
        for collection in collections
    ]
