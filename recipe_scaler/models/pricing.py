"""
Pricing data models for the Recipe Scaler.

This module defines the Pydantic models for per-ingredient costs and the
profit made on a recipe.
"""
from __future__ import annotations

import uuid
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

PackageUnit = Literal["g", "sticks", "count"]


class IngredientCost(BaseModel):
    """The cost of one ingredient as used in a recipe.

    Attributes:
        id: Unique identifier of the entry
        name: The ingredient name (e.g., 'butter')
        package_cost: Price paid for one package
        package_size: Package contents, in package_unit
        package_unit: 'g', 'sticks' or 'count'
        cost_per_unit: package_cost / package_size
        amount_used: Amount the recipe uses, in amount_unit
        amount_unit: 'g', 'sticks' or 'count'
        total_cost: cost_per_unit * amount_used
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(
        default_factory=lambda: uuid.uuid4().hex,
        description="Unique identifier of the cost entry"
    )
    name: str = Field(
        description="The name of the ingredient, e.g., 'unsalted butter'"
    )
    package_cost: float = Field(
        description="The price of one package, e.g., 4.99"
    )
    package_size: float = Field(
        description="The package size, e.g., 454 for a 454 g block"
    )
    package_unit: PackageUnit = Field(
        default="g",
        description="The unit of the package size"
    )
    cost_per_unit: float = Field(
        description="The price of one package unit"
    )
    amount_used: float = Field(
        description="The amount used in the recipe, e.g., 226"
    )
    amount_unit: PackageUnit = Field(
        default="g",
        description="The unit of the amount used"
    )
    total_cost: float = Field(
        description="The cost of the amount used"
    )


class ProfitMargin(BaseModel):
    """Profit made by selling a recipe at a given price.

    Attributes:
        profit: Selling price minus total cost
        margin_percentage: Profit as a percentage of the selling price
    """

    model_config = ConfigDict(frozen=True)

    profit: float
    margin_percentage: float
