#!/usr/bin/env python3
"""
Recipe Converter - Scale recipes from the command line

Reads ingredient lines and instructions from text files, converts the
ingredients to grams, scales the recipe by a multiplier and prints the
result. Optionally saves the structured recipe as JSON.
"""
import argparse
import json
import logging
import os
import sys
from pathlib import Path
from dotenv import load_dotenv

from recipe_scaler.const import (
    DATA_ERROR,
    DATA_INGREDIENTS,
    DATA_INSTRUCTIONS,
    DATA_MULTIPLIER,
    DEFAULT_LOG_LEVEL,
    DEFAULT_MULTIPLIER,
    ENV_LOG_LEVEL,
    ENV_MULTIPLIER,
)
from recipe_scaler.models.recipe import ParsedRecipe
from recipe_scaler.services.ingredient_formatter import format_recipe
from recipe_scaler.services.service_handlers import handle_scale_recipe

logger = logging.getLogger(__name__)


def _read_text(path: Path | None) -> str:
    """Read a UTF-8 text file, or return an empty string when no path is given."""
    if path is None:
        return ""
    return path.read_text(encoding='utf-8')


def scale_recipe_files(
    ingredients_file: Path,
    instructions_file: Path | None,
    multiplier: float,
    output_file: Path | None = None
) -> bool:
    """Scale the recipe in the given files and print it.

    Args:
        ingredients_file: File with one ingredient per line
        instructions_file: Optional file with the cooking instructions
        multiplier: Scaling factor
        output_file: Optional path to save the scaled recipe as JSON

    Returns:
        True if successful, False otherwise
    """
    try:
        ingredients_text = _read_text(ingredients_file)
        instructions_text = _read_text(instructions_file)
    except OSError as e:
        logger.error(f"Could not read recipe: {e}")
        return False

    result = handle_scale_recipe({
        DATA_INGREDIENTS: ingredients_text,
        DATA_INSTRUCTIONS: instructions_text,
        DATA_MULTIPLIER: multiplier,
    })

    if DATA_ERROR in result:
        logger.error(result[DATA_ERROR])
        return False

    recipe = ParsedRecipe.model_validate(result)
    print(format_recipe(recipe))

    if output_file:
        try:
            output_file.parent.mkdir(parents=True, exist_ok=True)
            logger.info(f"Saving scaled recipe to: {output_file}")
            with open(output_file, 'w', encoding='utf-8') as f:
                json.dump(result, f, indent=2, ensure_ascii=False)
        except OSError as e:
            logger.error(f"Could not save recipe: {e}")
            return False

    return True


def _default_multiplier() -> float:
    """Multiplier from the environment, falling back to the default."""
    value = os.getenv(ENV_MULTIPLIER)
    if not value:
        return DEFAULT_MULTIPLIER
    try:
        return float(value)
    except ValueError:
        logger.warning(
            f"Ignoring invalid {ENV_MULTIPLIER}={value!r}, using {DEFAULT_MULTIPLIER}")
        return DEFAULT_MULTIPLIER


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the recipe converter."""
    # Load environment variables
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="Convert recipe ingredients to grams and scale the recipe"
    )
    parser.add_argument(
        "ingredients_file",
        type=Path,
        help="Text file with one ingredient per line"
    )
    parser.add_argument(
        "--instructions-file",
        type=Path,
        help="Text file with the cooking instructions"
    )
    parser.add_argument(
        "--multiplier",
        type=float,
        default=None,
        help=f"Scaling factor between 0.3 and 3 (can also be set via {ENV_MULTIPLIER} env var, default: 1)"
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Save the scaled recipe as JSON to this file"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help=f"Logging level (can also be set via {ENV_LOG_LEVEL} env var, default: {DEFAULT_LOG_LEVEL})"
    )

    args = parser.parse_args(argv)

    # Configure logging
    log_level = (args.log_level or os.getenv(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    multiplier = args.multiplier if args.multiplier is not None else _default_multiplier()

    success = scale_recipe_files(
        ingredients_file=args.ingredients_file,
        instructions_file=args.instructions_file,
        multiplier=multiplier,
        output_file=args.output
    )

    return 0 if success else 1


if __name__ == "__main__":
    sys.exit(main())
