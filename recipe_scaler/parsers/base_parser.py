"""
Base Ingredient Parser.

This module defines the base interface that all ingredient line parsers
must implement.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from ..models.recipe import ParsedIngredient


class BaseIngredientParser(ABC):
    """Abstract base class for ingredient parsers.

    Parsers implement parse_line to convert one raw line of text into a
    ParsedIngredient; parse_ingredients applies it to a whole block of text.
    """

    @abstractmethod
    def parse_line(self, line: str) -> ParsedIngredient | None:
        """Parse a single ingredient line.

        Args:
            line: The raw ingredient line

        Returns:
            A ParsedIngredient, or None if the line is blank
        """
        pass

    def parse_ingredients(self, text: str) -> list[ParsedIngredient]:
        """Parse every line of an ingredients block, dropping blank lines.

        Args:
            text: Ingredient lines separated by newlines

        Returns:
            Parsed ingredients in input order
        """
        ingredients = []
        for line in text.split('\n'):
            parsed = self.parse_line(line)
            if parsed is not None:
                ingredients.append(parsed)
        return ingredients
