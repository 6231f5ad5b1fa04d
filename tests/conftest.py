"""Shared fixtures for grocery-matcher tests."""

import json

import pytest

from grocery_matcher.models import (
    DietaryTag,
    Difficulty,
    Ingredient,
    NutritionInfo,
    Recipe,
    RecipeCategory,
)


def _make_recipe(name: str, ingredients: list[str], **kwargs) -> Recipe:
    return Recipe(name=name, ingredients=[Ingredient(name=n) for n in ingredients], **kwargs)


@pytest.fixture
def make_recipe():
    """Factory building a recipe from plain ingredient names."""
    return _make_recipe


@pytest.fixture
def pancakes():
    return _make_recipe(
        "Pancakes",
        ["Flour", "Milk", "Eggs"],
        id="pancakes",
        category=RecipeCategory.BREAKFAST,
        difficulty=Difficulty.EASY,
        prep_time=10,
        cook_time=15,
        dietary_tags={DietaryTag.VEGETARIAN},
        nutrition=NutritionInfo(calories=350, protein=10, carbs=50, fat=12),
    )


@pytest.fixture
def beef_stew():
    return _make_recipe(
        "Beef Stew",
        ["beef", "onion", "carrot", "potato"],
        id="beef-stew",
        category=RecipeCategory.DINNER,
        difficulty=Difficulty.MEDIUM,
        prep_time=20,
        cook_time=120,
        dietary_tags={DietaryTag.GLUTEN_FREE, DietaryTag.DAIRY_FREE},
        nutrition=NutritionInfo(calories=650, protein=45, carbs=40, fat=30),
    )


@pytest.fixture
def garlic_beef():
    return _make_recipe(
        "Garlic Beef",
        ["beef", "garlic"],
        id="garlic-beef",
        category=RecipeCategory.DINNER,
        difficulty=Difficulty.MEDIUM,
        total_time=25,
    )


@pytest.fixture
def caprese_salad():
    return _make_recipe(
        "Caprese Salad",
        ["tomato", "mozzarella", "basil", "olive oil"],
        id="caprese",
        category=RecipeCategory.SALAD,
        difficulty=Difficulty.EASY,
        prep_time=10,
        dietary_tags={DietaryTag.VEGETARIAN, DietaryTag.GLUTEN_FREE},
    )


@pytest.fixture
def chocolate_cake():
    return _make_recipe(
        "Chocolate Cake",
        ["flour", "sugar", "cocoa powder", "eggs", "butter"],
        id="chocolate-cake",
        category=RecipeCategory.DESSERT,
        difficulty=Difficulty.HARD,
        prep_time=30,
        cook_time=40,
        dietary_tags={DietaryTag.VEGETARIAN},
    )


@pytest.fixture
def sample_recipes(pancakes, beef_stew, garlic_beef, caprese_salad, chocolate_cake):
    return [pancakes, beef_stew, garlic_beef, caprese_salad, chocolate_cake]


@pytest.fixture
def recipes_file(tmp_path, sample_recipes):
    """Write the sample recipes to a JSON store and return its path."""
    path = tmp_path / "recipes.json"
    path.write_text(json.dumps([recipe.to_dict() for recipe in sample_recipes]), encoding="utf-8")
    return path
