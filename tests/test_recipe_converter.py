"""Tests for the recipe converter command line."""
import json

import pytest

import recipe_converter
from recipe_scaler.const import ENV_MULTIPLIER


@pytest.fixture
def recipe_files(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(ENV_MULTIPLIER, raising=False)
    ingredients = tmp_path / "ingredients.txt"
    ingredients.write_text("• 2 cups flour\nsalt to taste\n", encoding="utf-8")
    instructions = tmp_path / "instructions.txt"
    instructions.write_text("Bake for 30 minutes at 350°F", encoding="utf-8")
    return ingredients, instructions


def test_main_prints_scaled_recipe(recipe_files, capsys):
    ingredients, instructions = recipe_files

    exit_code = recipe_converter.main([
        str(ingredients),
        "--instructions-file", str(instructions),
        "--multiplier", "2",
    ])

    assert exit_code == 0
    output = capsys.readouterr().out
    assert "- 480g flour (was 2 cups)" in output
    assert "- salt to taste" in output
    assert "Bake for 60 minutes at 700°F" in output


def test_main_saves_json(recipe_files, tmp_path):
    ingredients, instructions = recipe_files
    output_file = tmp_path / "out" / "recipe.json"

    exit_code = recipe_converter.main([
        str(ingredients),
        "--instructions-file", str(instructions),
        "--output", str(output_file),
    ])

    assert exit_code == 0
    saved = json.loads(output_file.read_text(encoding="utf-8"))
    assert saved["multiplier"] == 1.0
    assert saved["ingredients"][0]["scaled_amount"] == 240.0
    assert saved["scaled_instructions"] == "Bake for 30 minutes at 350°F"


def test_multiplier_from_environment(recipe_files, capsys, monkeypatch):
    ingredients, _ = recipe_files
    monkeypatch.setenv(ENV_MULTIPLIER, "0.5")

    assert recipe_converter.main([str(ingredients)]) == 0
    assert "- 120g flour (was 2 cups)" in capsys.readouterr().out


def test_invalid_multiplier_in_environment_uses_default(recipe_files, capsys, monkeypatch):
    ingredients, _ = recipe_files
    monkeypatch.setenv(ENV_MULTIPLIER, "lots")

    assert recipe_converter.main([str(ingredients)]) == 0
    assert "- 240g flour (was 2 cups)" in capsys.readouterr().out


def test_multiplier_out_of_range_fails(recipe_files):
    ingredients, _ = recipe_files
    assert recipe_converter.main([str(ingredients), "--multiplier", "5"]) == 1


def test_missing_file_fails(tmp_path):
    assert recipe_converter.main([str(tmp_path / "missing.txt")]) == 1


def test_empty_recipe_fails(tmp_path):
    empty = tmp_path / "empty.txt"
    empty.write_text("\n\n", encoding="utf-8")
    assert recipe_converter.main([str(empty)]) == 1
