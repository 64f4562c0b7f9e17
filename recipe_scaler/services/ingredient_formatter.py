"""
Ingredient Scaler and Formatter.

This module scales parsed ingredients through gram conversion, rescales
times, sizes and temperatures mentioned in instruction text, and formats
the result for display.
"""
from __future__ import annotations

import logging
import math
import re
from typing import Iterable

from ..models.recipe import ParsedIngredient, ParsedRecipe
from ..unit_converter import convert_to_grams, format_quantity, scale_value

_LOGGER = logging.getLogger(__name__)

# Quantities in instructions that follow the batch size: pan sizes, times
# and temperatures. The unit must not run on into a longer word ("10 minced").
INSTRUCTION_QUANTITY_PATTERN = re.compile(
    r'(\d+\.?\d*)(\s*)'
    r'(inch|inches|cm|centimeters|minutes?|mins?|hours?|hrs?|°F|°C|degrees?)'
    r'(?![a-zA-Z])',
    re.IGNORECASE
)


def scale_ingredients(
    ingredients: Iterable[ParsedIngredient],
    multiplier: float
) -> list[ParsedIngredient]:
    """Scale ingredient quantities by a multiplier, in grams.

    Unmeasured ingredients are passed through unchanged. For the others the
    original amount is converted to grams and multiplied; amount and unit are
    kept so the original measure can still be shown.

    Args:
        ingredients: Parsed ingredients
        multiplier: Scaling factor, e.g. 0.5 for half a batch

    Returns:
        List of scaled ingredients, in the same order
    """
    scaled_ingredients = []
    for ingredient in ingredients:
        if ingredient.amount == 0:
            scaled_ingredients.append(ingredient)
            continue

        grams = convert_to_grams(ingredient.amount, ingredient.unit)
        scaled_grams = scale_value(grams, multiplier)
        _LOGGER.debug("Scaled %s: %s %s -> %s g -> %s g",
                      ingredient.ingredient, ingredient.amount, ingredient.unit,
                      grams, scaled_grams)
        scaled_ingredients.append(
            ingredient.model_copy(update={'scaled_amount': scaled_grams}))

    return scaled_ingredients


def scale_instructions(instructions: str, multiplier: float) -> str:
    """Rescale quantities embedded in instruction text.

    Only numbers followed by a size, time or temperature unit are touched;
    the number is multiplied directly, without gram conversion, and the unit
    and spacing are kept as written.

    Args:
        instructions: Free-form instruction text
        multiplier: Scaling factor

    Returns:
        The instruction text with rescaled quantities

    Examples:
        >>> scale_instructions("Bake for 30 minutes at 350°F", 2)
        'Bake for 60 minutes at 700°F'
    """
    def replace_quantity(match: re.Match) -> str:
        value, separator, unit = match.groups()
        scaled = scale_value(float(value), multiplier)
        if not math.isfinite(scaled):
            _LOGGER.debug("Leaving out-of-range quantity in '%s' unscaled", match.group(0))
            return match.group(0)
        return f"{format_quantity(scaled)}{separator}{unit}"

    return INSTRUCTION_QUANTITY_PATTERN.sub(replace_quantity, instructions)


def format_ingredient(ingredient: ParsedIngredient) -> str:
    """Format a scaled ingredient as a display line.

    Examples:
        '240g flour (was 2 cups)' for a measured ingredient,
        'salt to taste' for an unmeasured one
    """
    if ingredient.scaled_amount <= 0:
        return ingredient.ingredient

    was = format_quantity(ingredient.amount)
    if ingredient.unit:
        was = f"{was} {ingredient.unit}"
    return f"{format_quantity(ingredient.scaled_amount)}g {ingredient.ingredient} (was {was})"


def format_recipe(recipe: ParsedRecipe) -> str:
    """Format a scaled recipe as plain text.

    Args:
        recipe: The parsed and scaled recipe

    Returns:
        An "Ingredients" section and, when there are instructions, an
        "Instructions" section with the scaled text
    """
    parts = [
        f"Ingredients (scaled {format_quantity(recipe.multiplier)}x, in grams):"]
    for ingredient in recipe.ingredients:
        parts.append(f"- {format_ingredient(ingredient)}")

    if recipe.scaled_instructions.strip():
        parts.append("")
        parts.append("Instructions:")
        parts.append(recipe.scaled_instructions)

    formatted = '\n'.join(parts)
    _LOGGER.debug("Formatted recipe with %d ingredients",
                  len(recipe.ingredients))
    return formatted
