"""Ingredient and recipe value types."""

import uuid
from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

from .units import Unit, parse_unit_name


class IngredientCategory(str, Enum):
    DAIRY = "dairy"
    PRODUCE = "produce"
    PANTRY = "pantry"
    MEAT = "meat"
    FROZEN = "frozen"
    BAKERY = "bakery"
    BEVERAGE = "beverage"
    OTHER = "other"


class RecipeCategory(str, Enum):
    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    APPETIZER = "appetizer"
    SIDE = "side"
    DESSERT = "dessert"
    SNACK = "snack"
    MAIN = "main"
    SALAD = "salad"
    SOUP = "soup"
    BEVERAGE = "beverage"
    OTHER = "other"


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class DietaryTag(str, Enum):
    VEGETARIAN = "vegetarian"
    VEGAN = "vegan"
    GLUTEN_FREE = "gluten-free"
    DAIRY_FREE = "dairy-free"
    LOW_CARB = "low-carb"
    KETO = "keto"
    PALEO = "paleo"


def _new_id() -> str:
    return uuid.uuid4().hex


def _parse_enum(enum_cls: type[Enum], value: Any, default: Enum) -> Any:
    """Look up an enum member by value, falling back to default for unknown input."""
    if isinstance(value, enum_cls):
        return value
    if not isinstance(value, str):
        return default
    try:
        return enum_cls(value.strip().lower())
    except ValueError:
        return default


def parse_dietary_tag(value: str) -> DietaryTag | None:
    """
    Parse a dietary tag from its display or JSON spelling.

    Accepts "Gluten-Free", "gluten free", "glutenFree" and "gluten_free" for
    the same tag. Returns None for unknown tags.
    """
    if isinstance(value, DietaryTag):
        return value
    # Split camelCase before lowercasing ("lowCarb" -> "low-Carb")
    spaced = "".join(
        f"-{ch}" if ch.isupper() and i > 0 and value[i - 1].islower() else ch
        for i, ch in enumerate(value)
    )
    normalized = spaced.strip().lower().replace("_", "-").replace(" ", "-")
    normalized = normalized.replace("--", "-")
    try:
        return DietaryTag(normalized)
    except ValueError:
        return None


@dataclass(frozen=True)
class Ingredient:
    """A named ingredient with an amount, as supplied by the shopping list or a recipe."""

    name: str
    amount: float = 1.0
    unit: Unit = Unit.PIECE
    category: IngredientCategory = IngredientCategory.OTHER
    is_perishable: bool = False
    shelf_life_days: int | None = None
    notes: str | None = None
    order: int | None = None
    id: str = field(default_factory=_new_id)

    def __str__(self) -> str:
        parts = []
        if self.amount:
            amount = self.amount
            parts.append(str(int(amount)) if amount == int(amount) else f"{amount:g}")
        if self.unit != Unit.PIECE:
            parts.append(self.unit.value)
        parts.append(self.name)
        if self.notes:
            parts.append(f"({self.notes})")
        return " ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert ingredient to dictionary for serialization."""
        return {
            "id": self.id,
            "name": self.name,
            "amount": self.amount,
            "unit": self.unit.value,
            "category": self.category.value,
            "isPerishable": self.is_perishable,
            "shelfLife": self.shelf_life_days,
            "notes": self.notes,
            "order": self.order,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Ingredient":
        """Create ingredient from dictionary."""
        unit = data.get("unit")
        return cls(
            name=data["name"],
            amount=float(data.get("amount", 1.0)),
            unit=parse_unit_name(unit) or _parse_enum(Unit, unit, Unit.PIECE),
            category=_parse_enum(
                IngredientCategory, data.get("category"), IngredientCategory.OTHER
            ),
            is_perishable=bool(data.get("isPerishable", data.get("is_perishable", False))),
            shelf_life_days=data.get("shelfLife", data.get("shelf_life_days")),
            notes=data.get("notes"),
            order=data.get("order"),
            id=str(data.get("id") or _new_id()),
        )


@dataclass(frozen=True)
class NutritionInfo:
    """Per-serving nutrition summary (protein, carbs and fat in grams)."""

    calories: int
    protein: int = 0
    carbs: int = 0
    fat: int = 0


@dataclass(frozen=True)
class Recipe:
    """
    An immutable recipe.

    match_score and missing_ingredients are view state produced by the
    ranking functions for one ingredient context. They are never part of the
    recipe's stored data; use with_match() to get an annotated copy.
    """

    name: str
    ingredients: tuple[Ingredient, ...] = ()
    instructions: tuple[str, ...] = ()
    prep_time: int = 0  # minutes
    cook_time: int = 0  # minutes
    total_time: int | None = None  # minutes, overrides prep + cook
    servings: int = 1
    nutrition: NutritionInfo | None = None
    category: RecipeCategory = RecipeCategory.OTHER
    difficulty: Difficulty = Difficulty.MEDIUM
    dietary_tags: frozenset[DietaryTag] = frozenset()
    match_score: float = 0.0
    missing_ingredients: tuple[Ingredient, ...] = ()
    is_custom: bool = False
    source: str | None = None
    image: str | None = None
    id: str = field(default_factory=_new_id)

    def __post_init__(self) -> None:
        # Accept lists and sets from callers but store immutable containers
        object.__setattr__(self, "ingredients", tuple(self.ingredients))
        object.__setattr__(self, "instructions", tuple(self.instructions))
        object.__setattr__(self, "dietary_tags", frozenset(self.dietary_tags))
        object.__setattr__(self, "missing_ingredients", tuple(self.missing_ingredients))

    @property
    def time_minutes(self) -> int:
        """Total time to make the recipe."""
        if self.total_time is not None:
            return self.total_time
        return self.prep_time + self.cook_time

    @property
    def available_count(self) -> int:
        """Number of ingredients covered in the current match context."""
        return len(self.ingredients) - len(self.missing_ingredients)

    def with_match(self, score: float, missing: Sequence[Ingredient]) -> "Recipe":
        """Return a copy annotated with a match score and missing ingredients."""
        return replace(self, match_score=score, missing_ingredients=tuple(missing))

    def to_dict(self) -> dict[str, Any]:
        """Convert recipe to dictionary for serialization (match state is not stored)."""
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category.value,
            "difficulty": self.difficulty.value,
            "ingredients": [ing.to_dict() for ing in self.ingredients],
            "instructions": list(self.instructions),
            "prepTime": self.prep_time,
            "cookTime": self.cook_time,
            "totalTime": self.total_time,
            "servings": self.servings,
            "nutritionInfo": (
                {
                    "calories": self.nutrition.calories,
                    "protein": self.nutrition.protein,
                    "carbs": self.nutrition.carbs,
                    "fat": self.nutrition.fat,
                }
                if self.nutrition
                else None
            ),
            "dietaryTags": sorted(tag.value for tag in self.dietary_tags),
            "isCustom": self.is_custom,
            "source": self.source,
            "imageFileName": self.image,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Recipe":
        """Create recipe from dictionary."""
        nutrition_data = data.get("nutritionInfo") or data.get("nutrition")
        nutrition = None
        if nutrition_data:
            nutrition = NutritionInfo(
                calories=int(nutrition_data.get("calories", 0)),
                protein=int(nutrition_data.get("protein", 0)),
                carbs=int(nutrition_data.get("carbs", 0)),
                fat=int(nutrition_data.get("fat", 0)),
            )

        tags = set()
        for raw_tag in data.get("dietaryTags", data.get("dietary_tags", [])):
            tag = parse_dietary_tag(raw_tag)
            if tag is not None:
                tags.add(tag)

        total_time = data.get("totalTime", data.get("total_time"))
        return cls(
            name=data["name"],
            ingredients=[Ingredient.from_dict(ing) for ing in data.get("ingredients", [])],
            instructions=list(data.get("instructions", [])),
            prep_time=int(data.get("prepTime", data.get("prep_time", 0))),
            cook_time=int(data.get("cookTime", data.get("cook_time", 0))),
            total_time=int(total_time) if total_time is not None else None,
            servings=int(data.get("servings", 1)),
            nutrition=nutrition,
            category=_parse_enum(RecipeCategory, data.get("category"), RecipeCategory.OTHER),
            difficulty=_parse_enum(Difficulty, data.get("difficulty"), Difficulty.MEDIUM),
            dietary_tags=tags,
            is_custom=bool(data.get("isCustom", data.get("is_custom", False))),
            source=data.get("source"),
            image=data.get("imageFileName", data.get("image")),
            id=str(data.get("id") or _new_id()),
        )
