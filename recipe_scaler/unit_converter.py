"""Unit conversion utilities for recipe ingredients.

Every supported unit converts linearly to grams using a fixed average
density (1 ml of liquid weighs 1 g, a cup of a general dry ingredient
weighs 120 g). Units the table does not know are treated as already
canonical, e.g. the bare count in "3 eggs".
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType


class CanonicalUnit(str, Enum):
    """Units the conversion table understands."""

    CUP = "cup"
    TABLESPOON = "tablespoon"
    TEASPOON = "teaspoon"
    OUNCE = "ounce"
    MILLILITER = "milliliter"
    LITER = "liter"
    POUND = "pound"
    GRAM = "gram"
    KILOGRAM = "kilogram"


@dataclass(frozen=True)
class UnitConversion:
    """Linear conversion between a unit and grams.

    Attributes:
        unit: The canonical unit
        factor: Grams per one of the unit
    """

    unit: CanonicalUnit
    factor: float

    def to_grams(self, value: float) -> float:
        return value * self.factor

    def from_grams(self, grams: float) -> float:
        return grams / self.factor


# Grams per unit
UNIT_CONVERSIONS = MappingProxyType({
    # Volume, using ~120g per cup for general dry ingredients
    CanonicalUnit.CUP: UnitConversion(CanonicalUnit.CUP, 120),
    CanonicalUnit.TABLESPOON: UnitConversion(CanonicalUnit.TABLESPOON, 15),
    CanonicalUnit.TEASPOON: UnitConversion(CanonicalUnit.TEASPOON, 5),
    # 1ml = 1g for water-like liquids
    CanonicalUnit.MILLILITER: UnitConversion(CanonicalUnit.MILLILITER, 1),
    CanonicalUnit.LITER: UnitConversion(CanonicalUnit.LITER, 1000),
    # Weight
    CanonicalUnit.OUNCE: UnitConversion(CanonicalUnit.OUNCE, 28.35),
    CanonicalUnit.POUND: UnitConversion(CanonicalUnit.POUND, 453.592),
    CanonicalUnit.GRAM: UnitConversion(CanonicalUnit.GRAM, 1),
    CanonicalUnit.KILOGRAM: UnitConversion(CanonicalUnit.KILOGRAM, 1000),
})

# Singular, plural and abbreviated spellings
UNIT_ALIASES = MappingProxyType({
    "cup": CanonicalUnit.CUP,
    "cups": CanonicalUnit.CUP,
    "tablespoon": CanonicalUnit.TABLESPOON,
    "tablespoons": CanonicalUnit.TABLESPOON,
    "tbsp": CanonicalUnit.TABLESPOON,
    "teaspoon": CanonicalUnit.TEASPOON,
    "teaspoons": CanonicalUnit.TEASPOON,
    "tsp": CanonicalUnit.TEASPOON,
    "ounce": CanonicalUnit.OUNCE,
    "ounces": CanonicalUnit.OUNCE,
    "oz": CanonicalUnit.OUNCE,
    "milliliter": CanonicalUnit.MILLILITER,
    "milliliters": CanonicalUnit.MILLILITER,
    "ml": CanonicalUnit.MILLILITER,
    "liter": CanonicalUnit.LITER,
    "liters": CanonicalUnit.LITER,
    "l": CanonicalUnit.LITER,
    "pound": CanonicalUnit.POUND,
    "pounds": CanonicalUnit.POUND,
    "lb": CanonicalUnit.POUND,
    "lbs": CanonicalUnit.POUND,
    "gram": CanonicalUnit.GRAM,
    "grams": CanonicalUnit.GRAM,
    "g": CanonicalUnit.GRAM,
    "kilogram": CanonicalUnit.KILOGRAM,
    "kilograms": CanonicalUnit.KILOGRAM,
    "kg": CanonicalUnit.KILOGRAM,
})


def round_one_decimal(value: float) -> float:
    """Round to one decimal place, halves rounding up.

    Examples:
        >>> round_one_decimal(2.25)
        2.3
        >>> round_one_decimal(-0.25)
        -0.2

    Values too large to round, and non-finite values, are returned as is.
    """
    if not math.isfinite(value * 10):
        return value
    return math.floor(value * 10 + 0.5) / 10


def resolve_unit(unit: str | None) -> CanonicalUnit | None:
    """Look up the canonical unit for a unit string, ignoring case and padding."""
    if not unit:
        return None
    return UNIT_ALIASES.get(unit.lower().strip())


def convert_to_grams(value: float, unit: str | None) -> float:
    """
    Convert a quantity to grams.

    Args:
        value: The numeric quantity
        unit: The unit string (e.g., 'cups', 'Tbsp', 'lb')

    Returns:
        Grams rounded to one decimal place. Unknown or missing units
        return the value unchanged.

    Examples:
        >>> convert_to_grams(2, 'cups')
        240.0
        >>> convert_to_grams(1, 'oz')
        28.4
        >>> convert_to_grams(3, '')
        3
    """
    canonical = resolve_unit(unit)
    if canonical is None:
        return value
    return round_one_decimal(UNIT_CONVERSIONS[canonical].to_grams(value))


def convert_from_grams(grams: float, unit: str | None) -> float:
    """Convert grams back into the given unit; unknown units are identity."""
    canonical = resolve_unit(unit)
    if canonical is None:
        return grams
    return UNIT_CONVERSIONS[canonical].from_grams(grams)


def scale_value(value: float, multiplier: float) -> float:
    """Multiply a value and round the result to one decimal place."""
    return round_one_decimal(value * multiplier)


def format_quantity(quantity: float | int | None) -> str:
    """
    Format quantity to remove unnecessary decimals.

    Args:
        quantity: The numeric quantity (can be int, float, or None)

    Returns:
        Formatted string (empty string if quantity is None)

    Examples:
        >>> format_quantity(60.0)
        '60'
        >>> format_quantity(2.5)
        '2.5'
        >>> format_quantity(2.125)
        '2.13'
    """
    if quantity is None:
        return ""

    # Non-finite values have no integer form
    if not math.isfinite(quantity):
        return str(quantity)

    if quantity == int(quantity):
        return str(int(quantity))

    return f"{quantity:.2f}".rstrip('0').rstrip('.')
