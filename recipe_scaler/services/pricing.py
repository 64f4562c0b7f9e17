"""
Recipe Pricing.

This module computes what the ingredients of a recipe cost, from package
prices and the amounts used, and the profit margin at a selling price.
"""
from __future__ import annotations

import logging
from typing import Iterable

from ..models.pricing import IngredientCost, PackageUnit, ProfitMargin

_LOGGER = logging.getLogger(__name__)


def calculate_cost_per_unit(package_cost: float, package_size: float) -> float:
    """Price of one package unit; 0 for an empty or negative package size."""
    if package_size <= 0:
        return 0.0
    return package_cost / package_size


def calculate_total_cost(cost_per_unit: float, amount_used: float) -> float:
    return cost_per_unit * amount_used


def calculate_ingredient_cost(
    name: str,
    package_cost: float,
    package_size: float,
    package_unit: PackageUnit,
    amount_used: float,
    amount_unit: PackageUnit
) -> IngredientCost:
    """Work out the cost of the amount of an ingredient a recipe uses.

    Args:
        name: Ingredient name
        package_cost: Price of one package
        package_size: Package contents, in package_unit
        package_unit: 'g', 'sticks' or 'count'
        amount_used: Amount used, in amount_unit
        amount_unit: 'g', 'sticks' or 'count'

    Returns:
        IngredientCost with the per-unit and total cost filled in
    """
    cost_per_unit = calculate_cost_per_unit(package_cost, package_size)
    total_cost = calculate_total_cost(cost_per_unit, amount_used)
    _LOGGER.debug("Priced %s: %s %s at %.4f per %s = %.2f",
                  name, amount_used, amount_unit, cost_per_unit, package_unit,
                  total_cost)

    return IngredientCost(
        name=name,
        package_cost=package_cost,
        package_size=package_size,
        package_unit=package_unit,
        cost_per_unit=cost_per_unit,
        amount_used=amount_used,
        amount_unit=amount_unit,
        total_cost=total_cost,
    )


def calculate_total_recipe_cost(ingredients: Iterable[IngredientCost]) -> float:
    """Sum the total cost of every ingredient."""
    return sum((ingredient.total_cost for ingredient in ingredients), 0.0)


def calculate_profit_margin(total_cost: float, selling_price: float) -> ProfitMargin:
    """Profit and margin when selling at selling_price.

    The margin is 0 when nothing has been costed yet or when there is no
    selling price to divide by.

    Examples:
        >>> calculate_profit_margin(4.0, 10.0)
        ProfitMargin(profit=6.0, margin_percentage=60.0)
    """
    profit = selling_price - total_cost
    if total_cost > 0 and selling_price != 0:
        margin_percentage = profit / selling_price * 100
    else:
        margin_percentage = 0.0

    return ProfitMargin(profit=profit, margin_percentage=margin_percentage)
