"""Models package."""
from .pricing import IngredientCost, ProfitMargin
from .recipe import ParsedIngredient, ParsedRecipe

__all__ = ["IngredientCost", "ParsedIngredient", "ParsedRecipe", "ProfitMargin"]
