"""Tests for the recipe parsing pipeline."""
import pytest
from pydantic import ValidationError

from recipe_scaler import parse_recipe
from recipe_scaler.models.recipe import ParsedRecipe
from recipe_scaler.unit_converter import convert_to_grams

INGREDIENTS = """\
▢ 2 cups all-purpose flour
• 1 ½ tsp baking soda

1 stick butter (113g), softened
3 eggs
Sprinkles, for decorating
"""

INSTRUCTIONS = """\
Preheat the oven to 350°F.
Bake in a 9 inch pan for 30 minutes, then cool for 1 hour."""


def test_parse_recipe():
    recipe = parse_recipe(INGREDIENTS, INSTRUCTIONS, 2)

    assert [i.ingredient for i in recipe.ingredients] == [
        "all-purpose flour",
        "baking soda",
        "butter , softened",
        "eggs",
        "Sprinkles, for decorating",
    ]
    assert [i.scaled_amount for i in recipe.ingredients] == [480.0, 15.0, 226.0, 6.0, 0]
    assert recipe.instructions == INSTRUCTIONS
    assert recipe.scaled_instructions == (
        "Preheat the oven to 700°F.\n"
        "Bake in a 18 inch pan for 60 minutes, then cool for 2 hour."
    )
    assert recipe.multiplier == 2


def test_multiplier_one_scales_to_grams_only():
    recipe = parse_recipe(INGREDIENTS, INSTRUCTIONS, 1.0)
    for ingredient in recipe.ingredients:
        if ingredient.is_measured:
            assert ingredient.scaled_amount == convert_to_grams(ingredient.amount, ingredient.unit)
        else:
            assert ingredient.scaled_amount == 0
    assert recipe.scaled_instructions == INSTRUCTIONS


def test_default_multiplier_is_one():
    assert parse_recipe("2 cups flour", "") == parse_recipe("2 cups flour", "", 1.0)


def test_empty_input():
    recipe = parse_recipe("", "")
    assert recipe == ParsedRecipe(ingredients=(), instructions="", scaled_instructions="")


def test_instructions_only():
    recipe = parse_recipe("\n\n", "Rest 10 minutes", 0.5)
    assert recipe.ingredients == ()
    assert recipe.scaled_instructions == "Rest 5 minutes"


def test_out_of_range_numbers_do_not_raise():
    long_number = "9" * 400

    recipe = parse_recipe(long_number + " cups flour", "", 2)
    assert recipe.ingredients[0].amount == 0
    assert recipe.ingredients[0].scaled_amount == 0

    recipe = parse_recipe("", "Bake for " + long_number + " minutes", 2)
    assert recipe.scaled_instructions == "Bake for " + long_number + " minutes"


def test_recipe_is_immutable():
    recipe = parse_recipe("2 cups flour", "")
    assert isinstance(recipe.ingredients, tuple)
    with pytest.raises(ValidationError):
        recipe.instructions = "changed"
    with pytest.raises(ValidationError):
        recipe.ingredients[0].scaled_amount = 1


def test_model_dump_round_trips():
    recipe = parse_recipe(INGREDIENTS, INSTRUCTIONS, 1.5)
    assert ParsedRecipe.model_validate(recipe.model_dump()) == recipe
