"""
Ingredient Line Parser.

This module turns free-form ingredient lines such as "1 ½ cups flour" or
"▢ butter (113g)" into ParsedIngredient records using the fixed grammar
"amount [unit] ingredient".
"""
from __future__ import annotations

import math
import re
import logging
from ..const import GRAMS_UNIT
from ..models.recipe import ParsedIngredient
from .base_parser import BaseIngredientParser

_LOGGER = logging.getLogger(__name__)

# Unicode vulgar fractions and their ASCII equivalents
UNICODE_FRACTIONS = {
    '½': '1/2',
    '¼': '1/4',
    '¾': '3/4',
    '⅓': '1/3',
    '⅔': '2/3',
    '⅛': '1/8',
    '⅜': '3/8',
    '⅝': '5/8',
    '⅞': '7/8',
    '⅕': '1/5',
    '⅖': '2/5',
    '⅗': '3/5',
    '⅘': '4/5',
    '⅙': '1/6',
    '⅚': '5/6',
    '⅐': '1/7',
    '⅑': '1/9',
    '⅒': '1/10',
}

# Leading bullets and checkboxes copied from recipe sites
BULLET_PATTERN = re.compile(r'^\s*[▢\-*•]+\s*')
SPACE_BEFORE_PAREN_PATTERN = re.compile(r'\s+\(')

# Gram weight given in parentheses, e.g. "(113g)" or "( 250 G )"
GRAMS_PATTERN = re.compile(r'\((\s*\d+\.?\d*)\s*g\s*\)', re.IGNORECASE)

# "amount [unit] ingredient"; mixed numbers are tried before plain fractions
# and decimals so "1 1/2 cups" is not read as 1 of "1/2 cups"
QUANTITY_PATTERN = re.compile(
    r'^(\d+\s+\d+/\d+|\d*/\d+|\d+\.?\d*)\s*([a-zA-Z]+)?\s+(.+)$'
)


class IngredientLineParser(BaseIngredientParser):
    """Parses ingredient lines with a regular-expression grammar.

    Lines that do not start with a quantity are kept as unmeasured entries,
    so no text is ever lost.
    """

    def __init__(self) -> None:
        """Initialize the ingredient line parser."""
        _LOGGER.debug("Initialized IngredientLineParser")

    def _sanitize(self, line: str) -> str:
        """Strip bullets and normalize spacing before parentheses."""
        line = BULLET_PATTERN.sub('', line)
        line = SPACE_BEFORE_PAREN_PATTERN.sub(' (', line)
        return line.strip()

    def _apply_unicode_fractions(self, text: str) -> str:
        """Replace unicode fraction characters with ASCII fractions.

        A fraction glyph written directly after a digit becomes a mixed
        number: "1½" -> "1 1/2".

        Args:
            text: String potentially containing unicode fractions

        Returns:
            String with unicode fractions replaced
        """
        for fraction_char, fraction in UNICODE_FRACTIONS.items():
            if fraction_char not in text:
                continue
            text = re.sub(rf'(\d){re.escape(fraction_char)}', rf'\1 {fraction}', text)
            text = text.replace(fraction_char, fraction)
        return text

    def _parse_fraction(self, fraction_str: str) -> float:
        """Parse a fraction string like '1/2' or a plain number like '2.5'.

        Raises:
            ValueError: If the numerator or denominator is missing
            ZeroDivisionError: If denominator is zero
        """
        if '/' not in fraction_str:
            return float(fraction_str)

        numerator, denominator = fraction_str.split('/')
        return float(numerator) / float(denominator)

    def _parse_amount(self, amount_str: str) -> float | None:
        """Parse a decimal, fraction or mixed number.

        Args:
            amount_str: String like '2', '2.5', '1/2' or '1 1/2'

        Returns:
            Parsed value, or None for malformed fractions such as '1/0'
            and for numbers too large to represent
        """
        try:
            parts = amount_str.split()
            if len(parts) == 2:
                amount = float(parts[0]) + self._parse_fraction(parts[1])
            else:
                amount = self._parse_fraction(parts[0])
        except (ValueError, ZeroDivisionError) as e:
            _LOGGER.debug("Failed to parse amount '%s': %s", amount_str, e)
            return None

        if not math.isfinite(amount):
            _LOGGER.debug("Amount '%s' is out of range", amount_str)
            return None
        return amount

    def parse_line(self, line: str) -> ParsedIngredient | None:
        """Parse one raw ingredient line.

        Supports:
        - Unit and ingredient: "2 cups flour", "250g flour"
        - Fractions and mixed numbers: "1/2 cup sugar", "1 ½ cups milk"
        - Counts: "3 eggs" (no unit)
        - Gram weights in parentheses: "1 stick butter (113g)", "butter (113g)"
        - Anything else, e.g. "salt to taste", is kept unmeasured

        Args:
            line: Raw ingredient line

        Returns:
            ParsedIngredient, or None if the line is blank after cleanup
        """
        text = self._apply_unicode_fractions(self._sanitize(line))
        if not text:
            return None

        grams_match = GRAMS_PATTERN.search(text)
        grams = float(grams_match.group(1)) if grams_match else None
        # A zero or unrepresentable gram weight carries no quantity
        if grams is not None and not (math.isfinite(grams) and grams > 0):
            _LOGGER.debug("Ignoring gram weight %s in '%s'", grams, text)
            grams = None

        match = QUANTITY_PATTERN.match(text)
        amount = self._parse_amount(match.group(1)) if match else None

        if match and amount:
            unit = match.group(2) or ''
            ingredient = match.group(3).strip()

            # A parenthetical gram weight is more precise than the written unit
            if grams is not None:
                amount = grams
                unit = GRAMS_UNIT
                ingredient = GRAMS_PATTERN.sub('', ingredient, count=1).strip()

            _LOGGER.debug("Parsed '%s' as amount=%s unit='%s' ingredient='%s'",
                          text, amount, unit, ingredient)
            return ParsedIngredient(
                original=text,
                amount=amount,
                unit=unit,
                ingredient=ingredient,
                scaled_amount=amount,
            )

        if grams is not None:
            ingredient = GRAMS_PATTERN.sub('', text, count=1).strip()
            _LOGGER.debug("Parsed '%s' from gram weight: %s g", text, grams)
            return ParsedIngredient(
                original=text,
                amount=grams,
                unit=GRAMS_UNIT,
                ingredient=ingredient,
                scaled_amount=grams,
            )

        _LOGGER.debug("No quantity found in '%s', keeping it unmeasured", text)
        return ParsedIngredient(
            original=text,
            amount=0.0,
            unit='',
            ingredient=text,
            scaled_amount=0.0,
        )


_PARSER = IngredientLineParser()


def parse_line(line: str) -> ParsedIngredient | None:
    """Parse one ingredient line with the shared parser."""
    return _PARSER.parse_line(line)


def parse_ingredients(text: str) -> list[ParsedIngredient]:
    """Parse a block of ingredient lines with the shared parser."""
    return _PARSER.parse_ingredients(text)
