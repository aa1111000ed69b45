"""Ingredient line parsing and metric conversion."""

import re
from collections.abc import Iterable
from dataclasses import dataclass, replace

from recipenorm.logging_config import get_logger
from recipenorm.normalize.cleaning import clean_ingredient
from recipenorm.normalize.quantity import format_number, parse_quantity, round_half_up
from recipenorm.normalize.tables import UnitFamily, UnitToken, get_ingredient_density
from recipenorm.normalize.tokens import TokenKind, read_unit, render, skip_space, tokenize

logger = get_logger(__name__)

_LEADING_PREPOSITION_RE = re.compile(r"^(?:of|for)\s+", re.IGNORECASE)
_TRAILING_QUALIFIER_RE = re.compile(r",\s*(?:optional|divided|plus more for).*$", re.IGNORECASE)

# Base value at which output switches from ml/g to L/kg
LARGE_UNIT_THRESHOLD = 1000

METRIC_SYMBOLS: dict[UnitFamily, tuple[str, str]] = {
    UnitFamily.VOLUME: ("ml", "L"),
    UnitFamily.WEIGHT: ("g", "kg"),
}


@dataclass
class ParsedIngredientLine:
    """An ingredient line split into quantity, unit and ingredient name."""

    original: str
    quantity: float | None
    unit: UnitToken | None
    ingredient: str
    converted: str | None = None

    @property
    def output(self) -> str:
        """The converted string, or the original line when not converted."""
        return self.converted or self.original


def extract_ingredient_name(text: str) -> str:
    """
    Clean the text that follows the quantity and unit.

    "of flour, divided" -> "flour"
    """
    name = _LEADING_PREPOSITION_RE.sub("", text.strip())
    return _TRAILING_QUALIFIER_RE.sub("", name).strip()


def parse_ingredient(ingredient_str: str) -> ParsedIngredientLine:
    """
    Parse an ingredient line.

    Examples:
        "2 cups flour" -> quantity=2.0, unit=cups, ingredient="flour"
        "1 smidge of salt" -> quantity=1.0, unit=None, ingredient="smidge of salt"
        "Salt to taste" -> quantity=None, unit=None, ingredient="Salt to taste"
    """
    text = ingredient_str.strip()
    tokens = tokenize(text)

    if not tokens or tokens[0].kind is not TokenKind.QUANTITY:
        return ParsedIngredientLine(
            original=ingredient_str, quantity=None, unit=None, ingredient=text
        )

    quantity = parse_quantity(tokens[0].text)
    index = skip_space(tokens, 1)

    unit = None
    unit_read = read_unit(tokens, index)
    if unit_read is not None and unit_read.unit is not None:
        unit = unit_read.unit
        index = unit_read.end

    return ParsedIngredientLine(
        original=ingredient_str,
        quantity=quantity,
        unit=unit,
        ingredient=extract_ingredient_name(render(tokens[index:]).lower()),
    )


def format_metric(base_value: float, family: UnitFamily) -> tuple[str, str]:
    """
    Format a value in ml or g for display.

    Returns:
        Tuple of (amount, unit symbol)
    """
    small, large = METRIC_SYMBOLS[family]
    if base_value >= LARGE_UNIT_THRESHOLD:
        return format_number(base_value / LARGE_UNIT_THRESHOLD), large
    return str(round_half_up(base_value)), small


def convert_ingredient_to_metric(parsed: ParsedIngredientLine) -> ParsedIngredientLine:
    """Convert a parsed ingredient to metric, or return it unchanged."""
    # a zero amount is treated like a missing one
    if not parsed.quantity or parsed.unit is None:
        return parsed

    amount, symbol = format_metric(parsed.quantity * parsed.unit.factor, parsed.unit.family)
    converted = f"{amount} {symbol} {parsed.ingredient}".strip()
    return replace(parsed, converted=converted)


def estimate_weight_grams(parsed: ParsedIngredientLine) -> float | None:
    """
    Estimate the weight of a parsed ingredient in grams.

    Volume units go through the ingredient density table. This is an
    estimate for callers that ask for one; the metric conversion above
    never turns volumes into weights.
    """
    if parsed.quantity is None or parsed.unit is None:
        return None

    base_value = parsed.quantity * parsed.unit.factor
    if parsed.unit.family is UnitFamily.WEIGHT:
        return base_value

    density, _ = get_ingredient_density(parsed.ingredient)
    return base_value * density


def convert_ingredient(ingredient_str: str) -> str:
    """Convert an ingredient string from imperial to metric."""
    converted = convert_ingredient_to_metric(parse_ingredient(ingredient_str))
    if converted.converted is None:
        logger.debug(f"No conversion for ingredient '{ingredient_str}'")
    return converted.output


def convert_recipe_ingredients(ingredients: Iterable[str]) -> list[str]:
    """Clean and convert all ingredients of a recipe, dropping empty lines."""
    cleaned = (clean_ingredient(ingredient) for ingredient in ingredients)
    return [convert_ingredient(ingredient) for ingredient in cleaned if ingredient]
