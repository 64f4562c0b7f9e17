"""
Recipe Scaler.

Parses free-form ingredient lines and cooking instructions, converts
ingredient quantities to grams and rescales a whole recipe by a multiplier.
Ingredient costs and the profit on a recipe can be worked out as well.
"""
from __future__ import annotations

from .models.pricing import IngredientCost, ProfitMargin
from .models.recipe import ParsedIngredient, ParsedRecipe
from .parsers.ingredient_parser import parse_ingredients, parse_line
from .services.ingredient_formatter import (
    format_ingredient,
    format_recipe,
    scale_ingredients,
    scale_instructions,
)
from .services.pricing import (
    calculate_ingredient_cost,
    calculate_profit_margin,
    calculate_total_recipe_cost,
)
from .services.recipe_service import parse_recipe
from .services.service_handlers import handle_price_ingredient, handle_scale_recipe
from .unit_converter import convert_from_grams, convert_to_grams, scale_value

__all__ = [
    "IngredientCost",
    "ParsedIngredient",
    "ParsedRecipe",
    "ProfitMargin",
    "calculate_ingredient_cost",
    "calculate_profit_margin",
    "calculate_total_recipe_cost",
    "convert_from_grams",
    "convert_to_grams",
    "format_ingredient",
    "format_recipe",
    "handle_price_ingredient",
    "handle_scale_recipe",
    "parse_ingredients",
    "parse_line",
    "parse_recipe",
    "scale_ingredients",
    "scale_instructions",
    "scale_value",
]
