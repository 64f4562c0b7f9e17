"""Tests for ingredient costs and profit margins."""
import logging

import pydantic
import pytest

from recipe_scaler.const import DATA_ERROR
from recipe_scaler.models.pricing import IngredientCost, ProfitMargin
from recipe_scaler.services.pricing import (
    calculate_cost_per_unit,
    calculate_ingredient_cost,
    calculate_profit_margin,
    calculate_total_cost,
    calculate_total_recipe_cost,
)
from recipe_scaler.services.service_handlers import (
    PRICE_INGREDIENT_SCHEMA,
    handle_price_ingredient,
)


def test_cost_per_unit():
    assert calculate_cost_per_unit(5.0, 500) == 0.01
    assert calculate_cost_per_unit(3.0, 12) == 0.25


@pytest.mark.parametrize("package_size", [0, -10])
def test_cost_per_unit_without_package_size_is_zero(package_size):
    assert calculate_cost_per_unit(5.0, package_size) == 0


def test_total_cost():
    assert calculate_total_cost(0.25, 4) == 1.0


def test_calculate_ingredient_cost():
    cost = calculate_ingredient_cost("butter", 4.0, 4, "sticks", 2, "sticks")

    assert cost.name == "butter"
    assert cost.package_cost == 4.0
    assert cost.package_size == 4
    assert cost.package_unit == "sticks"
    assert cost.cost_per_unit == 1.0
    assert cost.amount_used == 2
    assert cost.amount_unit == "sticks"
    assert cost.total_cost == 2.0


def test_ingredient_cost_uses_package_price_per_gram():
    cost = calculate_ingredient_cost("flour", 4.99, 454, "g", 226, "g")
    assert cost.cost_per_unit == pytest.approx(4.99 / 454)
    assert cost.total_cost == pytest.approx(4.99 / 454 * 226)


def test_ingredient_costs_get_distinct_ids():
    first = calculate_ingredient_cost("eggs", 3.0, 12, "count", 2, "count")
    second = calculate_ingredient_cost("eggs", 3.0, 12, "count", 2, "count")
    assert first.id
    assert first.id != second.id


def test_ingredient_cost_is_frozen():
    cost = calculate_ingredient_cost("sugar", 2.0, 1000, "g", 200, "g")
    with pytest.raises(pydantic.ValidationError):
        cost.total_cost = 0


def test_ingredient_cost_rejects_unknown_package_unit():
    with pytest.raises(pydantic.ValidationError):
        IngredientCost(name="milk", package_cost=1, package_size=1, package_unit="cups",
                       cost_per_unit=1, amount_used=1, total_cost=1)


def test_total_recipe_cost():
    ingredients = [
        calculate_ingredient_cost("flour", 2.0, 1000, "g", 500, "g"),
        calculate_ingredient_cost("butter", 4.0, 4, "sticks", 1, "sticks"),
        calculate_ingredient_cost("eggs", 3.0, 12, "count", 2, "count"),
    ]
    assert calculate_total_recipe_cost(ingredients) == pytest.approx(1.0 + 1.0 + 0.5)


def test_total_recipe_cost_of_nothing_is_zero():
    assert calculate_total_recipe_cost([]) == 0


def test_profit_margin():
    assert calculate_profit_margin(4.0, 10.0) == ProfitMargin(profit=6.0, margin_percentage=60.0)


def test_profit_margin_when_selling_at_a_loss():
    margin = calculate_profit_margin(12.0, 10.0)
    assert margin.profit == -2.0
    assert margin.margin_percentage == pytest.approx(-20.0)


def test_profit_margin_without_costs_is_zero():
    margin = calculate_profit_margin(0, 10.0)
    assert margin.profit == 10.0
    assert margin.margin_percentage == 0


def test_profit_margin_without_selling_price_is_zero():
    margin = calculate_profit_margin(4.0, 0)
    assert margin.profit == -4.0
    assert margin.margin_percentage == 0


def test_handle_price_ingredient():
    result = handle_price_ingredient({
        "name": "  butter ",
        "package_cost": "4",
        "package_size": 4,
        "package_unit": "sticks",
        "amount_used": 2,
        "amount_unit": "sticks",
    })

    assert DATA_ERROR not in result
    assert result["name"] == "butter"
    assert result["cost_per_unit"] == 1.0
    assert result["total_cost"] == 2.0


def test_price_schema_defaults_to_grams():
    request = PRICE_INGREDIENT_SCHEMA(
        {"name": "flour", "package_cost": 2, "package_size": 1000, "amount_used": 250})
    assert request["package_unit"] == "g"
    assert request["amount_unit"] == "g"


@pytest.mark.parametrize("field,value", [
    ("name", "   "),
    ("package_cost", 0),
    ("package_cost", -1),
    ("package_size", 0),
    ("package_size", "nan"),
    ("amount_used", 0),
    ("amount_used", "lots"),
    ("package_unit", "cups"),
])
def test_invalid_pricing_request_is_rejected(field, value, caplog):
    data = {"name": "flour", "package_cost": 2, "package_size": 1000, "amount_used": 250}
    data[field] = value

    with caplog.at_level(logging.WARNING):
        result = handle_price_ingredient(data)

    assert result[DATA_ERROR].startswith("Invalid pricing request")
    assert "Invalid pricing request" in caplog.text


def test_pricing_request_requires_amount_used():
    result = handle_price_ingredient({"name": "flour", "package_cost": 2, "package_size": 1000})
    assert DATA_ERROR in result
