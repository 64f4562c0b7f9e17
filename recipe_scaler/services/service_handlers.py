"""
Service Handlers.

This module contains the validated entry points used by front ends to scale
a recipe and to price an ingredient: request data is checked against a
voluptuous schema before the service runs.
"""
from __future__ import annotations

import logging
from typing import Any

import voluptuous as vol

from ..const import (
    DATA_AMOUNT_UNIT,
    DATA_AMOUNT_USED,
    DATA_ERROR,
    DATA_INGREDIENTS,
    DATA_INSTRUCTIONS,
    DATA_MULTIPLIER,
    DATA_NAME,
    DATA_PACKAGE_COST,
    DATA_PACKAGE_SIZE,
    DATA_PACKAGE_UNIT,
    DEFAULT_MULTIPLIER,
    GRAMS_UNIT,
    MAX_MULTIPLIER,
    MIN_MULTIPLIER,
    PACKAGE_UNITS,
)
from .pricing import calculate_ingredient_cost
from .recipe_service import parse_recipe

_LOGGER = logging.getLogger(__name__)

SCALE_RECIPE_SCHEMA = vol.Schema(
    {
        vol.Optional(DATA_INGREDIENTS, default=""): str,
        vol.Optional(DATA_INSTRUCTIONS, default=""): str,
        vol.Optional(DATA_MULTIPLIER, default=DEFAULT_MULTIPLIER): vol.All(
            vol.Coerce(float),
            vol.Range(min=MIN_MULTIPLIER, max=MAX_MULTIPLIER),
        ),
    }
)


def handle_scale_recipe(data: dict[str, Any]) -> dict[str, Any]:
    """Handle a scale recipe request.

    Args:
        data: Request data with ingredients, instructions and multiplier

    Returns:
        Dictionary with the scaled recipe, or with an error message
    """
    try:
        request = SCALE_RECIPE_SCHEMA(data)
    except vol.Invalid as e:
        error_msg = f"Invalid recipe request: {e}"
        _LOGGER.warning(error_msg)
        return {DATA_ERROR: error_msg}

    ingredients_text = request[DATA_INGREDIENTS]
    instructions_text = request[DATA_INSTRUCTIONS]
    multiplier = request[DATA_MULTIPLIER]

    if not ingredients_text.strip() and not instructions_text.strip():
        error_msg = "Recipe is empty - please enter ingredients or instructions"
        _LOGGER.warning(error_msg)
        return {DATA_ERROR: error_msg}

    try:
        recipe = parse_recipe(ingredients_text, instructions_text, multiplier)
    except Exception as e:
        error_msg = f"Error scaling recipe: {str(e)}"
        _LOGGER.error("Recipe scaling failed: %s", error_msg, exc_info=True)
        return {DATA_ERROR: error_msg}

    _LOGGER.info("Recipe scaled by %sx", multiplier)
    return recipe.model_dump()


def _positive_number(message: str) -> vol.All:
    return vol.All(
        vol.Coerce(float),
        vol.Range(min=0, min_included=False, msg=message),
    )


PRICE_INGREDIENT_SCHEMA = vol.Schema(
    {
        vol.Required(DATA_NAME): vol.All(
            str, vol.Strip, vol.Length(min=1, msg="Please enter an ingredient name")
        ),
        vol.Required(DATA_PACKAGE_COST): _positive_number(
            "Please enter a valid package cost"),
        vol.Required(DATA_PACKAGE_SIZE): _positive_number(
            "Please enter a valid package size"),
        vol.Optional(DATA_PACKAGE_UNIT, default=GRAMS_UNIT): vol.In(PACKAGE_UNITS),
        vol.Required(DATA_AMOUNT_USED): _positive_number(
            "Please enter a valid amount used"),
        vol.Optional(DATA_AMOUNT_UNIT, default=GRAMS_UNIT): vol.In(PACKAGE_UNITS),
    }
)


def handle_price_ingredient(data: dict[str, Any]) -> dict[str, Any]:
    """Handle an ingredient pricing request.

    Args:
        data: Request data with the package price, package size and the
            amount the recipe uses

    Returns:
        Dictionary with the priced ingredient, or with an error message
    """
    try:
        request = PRICE_INGREDIENT_SCHEMA(data)
    except vol.Invalid as e:
        error_msg = f"Invalid pricing request: {e}"
        _LOGGER.warning(error_msg)
        return {DATA_ERROR: error_msg}

    cost = calculate_ingredient_cost(
        request[DATA_NAME],
        request[DATA_PACKAGE_COST],
        request[DATA_PACKAGE_SIZE],
        request[DATA_PACKAGE_UNIT],
        request[DATA_AMOUNT_USED],
        request[DATA_AMOUNT_UNIT],
    )
    _LOGGER.info("Priced %s at %.2f", cost.name, cost.total_cost)
    return cost.model_dump()
