"""Parsers package."""
from .base_parser import BaseIngredientParser
from .ingredient_parser import IngredientLineParser, parse_ingredients, parse_line

__all__ = ["BaseIngredientParser", "IngredientLineParser", "parse_ingredients", "parse_line"]
