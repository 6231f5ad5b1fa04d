"""Free-text ingredient parsing ("2 cups flour, eggs and milk")."""

import re

from .models import Ingredient, IngredientCategory
from .units import Unit, parse_unit_name

# Fraction to decimal mapping
FRACTIONS = {
    "½": 0.5,
    "⅓": 0.333,
    "⅔": 0.667,
    "¼": 0.25,
    "¾": 0.75,
    "⅕": 0.2,
    "⅖": 0.4,
    "⅗": 0.6,
    "⅘": 0.8,
    "⅙": 0.167,
    "⅚": 0.833,
    "⅛": 0.125,
    "⅜": 0.375,
    "⅝": 0.625,
    "⅞": 0.875,
    "1/2": 0.5,
    "1/3": 0.333,
    "2/3": 0.667,
    "1/4": 0.25,
    "3/4": 0.75,
    "1/8": 0.125,
}

# Keywords that place an ingredient in a store category, checked in order
CATEGORY_KEYWORDS: list[tuple[IngredientCategory, list[str]]] = [
    (IngredientCategory.DAIRY, ["milk", "cheese", "yogurt", "cream", "butter"]),
    (
        IngredientCategory.PRODUCE,
        [
            "apple",
            "banana",
            "orange",
            "lettuce",
            "tomato",
            "carrot",
            "onion",
            "pepper",
            "vegetable",
            "fruit",
        ],
    ),
    (IngredientCategory.MEAT, ["chicken", "beef", "pork", "fish", "salmon", "shrimp", "meat"]),
    (
        IngredientCategory.PANTRY,
        ["rice", "pasta", "flour", "sugar", "oil", "spice", "can", "sauce"],
    ),
    (IngredientCategory.FROZEN, ["frozen", "ice cream", "pizza"]),
    (IngredientCategory.BAKERY, ["bread", "muffin", "cake", "pastry", "cookie"]),
]

# Commas between digits are decimal separators ("1,5 kg"), not list separators
_LIST_SEPARATOR = re.compile(r"\n|(?<!\d),|,(?!\d)|;|\band\b", re.IGNORECASE)


def parse_quantity(text: str) -> tuple[float | None, str]:
    """
    Parse quantity from the beginning of an ingredient string.

    Handles both period (.) and comma (,) as decimal separators.

    Returns:
        Tuple of (quantity, remaining_text)
    """
    text = text.strip()

    # Check for unicode fractions first
    for frac, value in FRACTIONS.items():
        if text.startswith(frac):
            return value, text[len(frac) :].strip()

    # Match patterns like "3/5", "1", "1.5", "1,5", "1 1/2", "1-2" (range)
    pattern = r"^(\d+/\d+|\d+(?:[\.,]\d+)?(?:\s*[-–]\s*\d+(?:[\.,]\d+)?)?(?:\s+\d+/\d+)?)"
    match = re.match(pattern, text)
    if not match:
        return None, text

    qty_str = match.group(1).replace(",", ".")
    remaining = text[match.end() :].strip()

    # Handle ranges (take the higher value)
    if "-" in qty_str or "–" in qty_str:
        return float(re.split(r"[-–]", qty_str)[-1].strip()), remaining

    # Handle mixed numbers like "1 1/2"
    if " " in qty_str and "/" in qty_str:
        whole, frac = qty_str.split()
        numerator, denominator = frac.split("/")
        if float(denominator) == 0:
            return None, text
        return float(whole) + float(numerator) / float(denominator), remaining

    # Handle simple fractions like "1/2"
    if "/" in qty_str:
        numerator, denominator = qty_str.split("/")
        if float(denominator) == 0:
            return None, text
        return float(numerator) / float(denominator), remaining

    return float(qty_str), remaining


def parse_unit(text: str) -> tuple[Unit | None, str]:
    """
    Parse unit from the beginning of text.

    Returns:
        Tuple of (unit, remaining_text)
    """
    words = text.strip().split()
    if len(words) < 2:
        # A lone word is the ingredient name, never a unit ("c", "l")
        return None, text.strip()

    unit = parse_unit_name(words[0])
    if unit is None:
        return None, text.strip()
    return unit, " ".join(words[1:])


def guess_category(name: str) -> IngredientCategory:
    """Guess the store category of an ingredient from keywords in its name."""
    lowered = name.lower()
    for category, keywords in CATEGORY_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return category
    return IngredientCategory.OTHER


def parse_ingredient_text(text: str) -> Ingredient:
    """
    Parse a single ingredient into structured data.

    Args:
        text: Raw ingredient text (e.g., "2 cups flour (sifted)")

    Returns:
        Ingredient with amount defaulting to 1 and unit to piece
    """
    quantity, remaining = parse_quantity(text)
    unit, remaining = parse_unit(remaining)

    notes = None
    name = remaining

    # Check for parenthetical notes
    paren_match = re.search(r"\(([^)]+)\)", remaining)
    if paren_match:
        notes = paren_match.group(1).strip()
        name = remaining[: paren_match.start()] + remaining[paren_match.end() :]

    # Clean up name
    name = re.sub(r"\s+", " ", name).strip().rstrip(",.")

    return Ingredient(
        name=name,
        amount=quantity if quantity is not None else 1.0,
        unit=unit or Unit.PIECE,
        category=guess_category(name),
        notes=notes,
    )


def parse_ingredient_list(text: str) -> list[Ingredient]:
    """
    Parse a free-text ingredient list.

    Items may be separated by newlines, commas, semicolons or the word
    "and". The word "and" always splits, so a dish name such as "mac and
    cheese" becomes two items. Bullets and list numbering are ignored.

    Args:
        text: e.g. "2 cups flour, 3 eggs and milk"

    Returns:
        Ingredients in the order given
    """
    ingredients = []

    for item in _LIST_SEPARATOR.split(text):
        item = item.strip()
        # Skip bullet points and numbers at start
        item = re.sub(r"^[\-\*•]\s*", "", item)
        item = re.sub(r"^\d+\.\s+", "", item)
        if not item:
            continue
        ingredient = parse_ingredient_text(item)
        if ingredient.name:
            ingredients.append(ingredient)

    return ingredients
