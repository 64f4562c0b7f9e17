"""
Recipe Scaling Service.

This module orchestrates parsing and scaling of a recipe: ingredient lines
are parsed and scaled in grams, and the instructions are rescaled
independently.
"""
from __future__ import annotations

import logging

from ..const import DEFAULT_MULTIPLIER
from ..models.recipe import ParsedRecipe
from ..parsers.ingredient_parser import parse_ingredients
from .ingredient_formatter import scale_ingredients, scale_instructions

_LOGGER = logging.getLogger(__name__)


def parse_recipe(
    ingredients_text: str,
    instructions_text: str,
    multiplier: float = DEFAULT_MULTIPLIER
) -> ParsedRecipe:
    """Parse and scale a recipe.

    This function orchestrates the pipeline:
    1. Parses every non-blank ingredient line
    2. Converts measured ingredients to grams and scales them
    3. Rescales times, sizes and temperatures in the instructions

    Empty input is not an error; it yields an empty ingredient list and
    unchanged instructions.

    Args:
        ingredients_text: Ingredient lines separated by newlines
        instructions_text: Free-form instructions
        multiplier: Scaling factor, e.g. 2 for a double batch

    Returns:
        ParsedRecipe with scaled ingredients and instructions
    """
    _LOGGER.debug("Parsing recipe with multiplier %s", multiplier)

    ingredients = parse_ingredients(ingredients_text)
    scaled_ingredients = scale_ingredients(ingredients, multiplier)
    scaled_instructions = scale_instructions(instructions_text, multiplier)

    _LOGGER.info(
        "Scaled recipe with %d ingredients (%d measured) by %sx",
        len(scaled_ingredients),
        sum(1 for ingredient in scaled_ingredients if ingredient.is_measured),
        multiplier
    )

    return ParsedRecipe(
        ingredients=scaled_ingredients,
        instructions=instructions_text,
        scaled_instructions=scaled_instructions,
        multiplier=multiplier,
    )
