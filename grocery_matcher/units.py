"""Ingredient units and unit name parsing."""

from enum import Enum


class Unit(str, Enum):
    """Measurement unit of an ingredient amount."""

    PIECE = "piece"
    GRAM = "gram"
    KILOGRAM = "kilogram"
    MILLILITER = "milliliter"
    LITER = "liter"
    CUP = "cup"
    TABLESPOON = "tablespoon"
    TEASPOON = "teaspoon"
    POUND = "pound"
    OUNCE = "ounce"


# Recipe unit aliases (maps free-text units to standard units)
UNIT_ALIASES: dict[str, Unit] = {
    # Count
    "piece": Unit.PIECE,
    "pieces": Unit.PIECE,
    "pcs": Unit.PIECE,
    "pc": Unit.PIECE,
    "unit": Unit.PIECE,
    "units": Unit.PIECE,
    # Weight
    "g": Unit.GRAM,
    "gr": Unit.GRAM,
    "gram": Unit.GRAM,
    "grams": Unit.GRAM,
    "kg": Unit.KILOGRAM,
    "kilo": Unit.KILOGRAM,
    "kilogram": Unit.KILOGRAM,
    "kilograms": Unit.KILOGRAM,
    "lb": Unit.POUND,
    "lbs": Unit.POUND,
    "pound": Unit.POUND,
    "pounds": Unit.POUND,
    "oz": Unit.OUNCE,
    "ounce": Unit.OUNCE,
    "ounces": Unit.OUNCE,
    # Volume
    "ml": Unit.MILLILITER,
    "milliliter": Unit.MILLILITER,
    "milliliters": Unit.MILLILITER,
    "millilitre": Unit.MILLILITER,
    "millilitres": Unit.MILLILITER,
    "l": Unit.LITER,
    "liter": Unit.LITER,
    "liters": Unit.LITER,
    "litre": Unit.LITER,
    "litres": Unit.LITER,
    "cup": Unit.CUP,
    "cups": Unit.CUP,
    "c": Unit.CUP,
    "tablespoon": Unit.TABLESPOON,
    "tablespoons": Unit.TABLESPOON,
    "tbsp": Unit.TABLESPOON,
    "tbs": Unit.TABLESPOON,
    "tb": Unit.TABLESPOON,
    "teaspoon": Unit.TEASPOON,
    "teaspoons": Unit.TEASPOON,
    "tsp": Unit.TEASPOON,
    "ts": Unit.TEASPOON,
}


def parse_unit_name(text: str | None) -> Unit | None:
    """Map a unit word ("tbsp", "Cups", "kg.") to a Unit, or None if unknown."""
    if not text:
        return None
    return UNIT_ALIASES.get(text.lower().strip().rstrip(",."))

