"""
Recipe data models for the Recipe Scaler.

This module defines the Pydantic models produced by the ingredient parser
and the recipe scaler. All models are frozen; scaling builds new instances.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ParsedIngredient(BaseModel):
    """A structured representation of a single ingredient line.

    Attributes:
        original: The sanitized source line (e.g., '2 cups flour')
        amount: Numeric quantity, 0 when no quantity was detected
        unit: Unit token as written (e.g., 'cups', 'g'), empty if none
        ingredient: The ingredient name (e.g., 'flour')
        scaled_amount: Equals amount until scaled, then the scaled grams
    """

    model_config = ConfigDict(frozen=True)

    original: str = Field(
        description="The ingredient line after bullet and fraction cleanup"
    )
    amount: float = Field(
        default=0.0,
        description="The numeric quantity, e.g., 1.5; 0 for unmeasured lines"
    )
    unit: str = Field(
        default="",
        description="The unit token as written, e.g., 'cups', 'tbsp', 'g'"
    )
    ingredient: str = Field(
        description="The ingredient text, e.g., 'all-purpose flour'"
    )
    scaled_amount: float = Field(
        default=0.0,
        description="The scaled quantity in grams, or amount before scaling"
    )

    @property
    def is_measured(self) -> bool:
        """Whether a quantity was detected on the line."""
        return self.amount > 0


class ParsedRecipe(BaseModel):
    """The parsed and scaled recipe handed to presentation code.

    Attributes:
        ingredients: Parsed ingredients in input order
        instructions: The instructions text exactly as entered
        scaled_instructions: Instructions with times, sizes and temperatures scaled
        multiplier: The multiplier the recipe was scaled by
    """

    model_config = ConfigDict(frozen=True)

    ingredients: tuple[ParsedIngredient, ...] = Field(
        default=(),
        description="One entry per non-blank ingredient line"
    )
    instructions: str = Field(
        default="",
        description="The original instructions text"
    )
    scaled_instructions: str = Field(
        default="",
        description="The instructions text with embedded quantities rescaled"
    )
    multiplier: float = Field(
        default=1.0,
        description="The scaling multiplier, e.g., 2.0 for a double batch"
    )
