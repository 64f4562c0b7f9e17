"""Services package."""
from .ingredient_formatter import (
    format_ingredient,
    format_recipe,
    scale_ingredients,
    scale_instructions,
)
from .pricing import (
    calculate_cost_per_unit,
    calculate_ingredient_cost,
    calculate_profit_margin,
    calculate_total_cost,
    calculate_total_recipe_cost,
)
from .recipe_service import parse_recipe
from .service_handlers import (
    PRICE_INGREDIENT_SCHEMA,
    SCALE_RECIPE_SCHEMA,
    handle_price_ingredient,
    handle_scale_recipe,
)

__all__ = [
    "PRICE_INGREDIENT_SCHEMA",
    "SCALE_RECIPE_SCHEMA",
    "calculate_cost_per_unit",
    "calculate_ingredient_cost",
    "calculate_profit_margin",
    "calculate_total_cost",
    "calculate_total_recipe_cost",
    "format_ingredient",
    "format_recipe",
    "handle_price_ingredient",
    "handle_scale_recipe",
    "parse_recipe",
    "scale_ingredients",
    "scale_instructions",
]
