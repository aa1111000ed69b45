"""Normalize recipe measurements into metric units."""

from recipenorm.normalize.cleaning import clean_ingredient, clean_instruction
from recipenorm.normalize.dual import prefer_metric_measurement, prefer_weight_measurement
from recipenorm.normalize.ingredients import (
    ParsedIngredientLine,
    convert_ingredient,
    convert_ingredient_to_metric,
    convert_recipe_ingredients,
    estimate_weight_grams,
    parse_ingredient,
)
from recipenorm.normalize.instructions import (
    clean_recipe_instructions,
    convert_instruction_measurements,
)
from recipenorm.normalize.quantity import format_number, parse_quantity
from recipenorm.normalize.tables import UnitFamily, UnitToken, resolve_unit

__all__ = [
    "ParsedIngredientLine",
    "UnitFamily",
    "UnitToken",
    "clean_ingredient",
    "clean_instruction",
    "clean_recipe_instructions",
    "convert_ingredient",
    "convert_ingredient_to_metric",
    "convert_instruction_measurements",
    "convert_recipe_ingredients",
    "estimate_weight_grams",
    "format_number",
    "parse_ingredient",
    "parse_quantity",
    "prefer_metric_measurement",
    "prefer_weight_measurement",
    "resolve_unit",
]
