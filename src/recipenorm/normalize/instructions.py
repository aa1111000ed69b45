"""Metric rewriting of measurements embedded in instruction sentences."""

import re
from collections.abc import Iterable
from dataclasses import dataclass

from recipenorm.logging_config import get_logger
from recipenorm.normalize.cleaning import clean_instruction
from recipenorm.normalize.dual import prefer_metric_measurement
from recipenorm.normalize.ingredients import convert_ingredient_to_metric, parse_ingredient
from recipenorm.normalize.quantity import parse_quantity, parse_range, round_half_up
from recipenorm.normalize.tables import UnitToken, normalize_alias
from recipenorm.normalize.tokens import Token, TokenKind, read_unit, render, skip_space, tokenize

logger = get_logger(__name__)

QUALIFIERS = frozenset({"about", "scant"})
PLACEHOLDER = "placeholder"

# "In118 ml" -> "In 118 ml"
_GLUED_METRIC_RE = re.compile(r"([a-zA-Z])(\d+(?:\.\d+)?\s*(?:ml|l|L|g|kg|°C)\b)")


@dataclass(frozen=True)
class MeasurementSpan:
    """A measurement found inside a sentence, with its token range."""

    start: int
    end: int
    qualifier: str
    quantity: str
    unit_text: str
    unit: UnitToken | None  # None for temperatures
    text: str


def fahrenheit_to_celsius(fahrenheit: float) -> int:
    return round_half_up((fahrenheit - 32) * 5 / 9)


def _is_fahrenheit_word(token: Token) -> bool:
    if token.kind is not TokenKind.WORD:
        return False
    # a lone lowercase "f" is too ambiguous in prose
    return token.text == "F" or token.text.lower() == "fahrenheit"


def _read_temperature_unit(tokens: list[Token], index: int) -> int | None:
    """Return the end index of a Fahrenheit marker at index, if any."""
    if index >= len(tokens):
        return None

    token = tokens[index]
    if token.kind is TokenKind.DEGREE:
        if token.text[-1] in "Ff":
            return index + 1
        if token.text == "°":
            after = skip_space(tokens, index + 1)
            if after < len(tokens) and _is_fahrenheit_word(tokens[after]):
                return after + 1
        return None

    if _is_fahrenheit_word(token):
        return index + 1

    if token.kind is TokenKind.WORD and token.text.lower() == "degrees":
        after = skip_space(tokens, index + 1)
        if after < len(tokens) and _is_fahrenheit_word(tokens[after]):
            return after + 1

    return None


def _continues_sentence(tokens: list[Token], index: int) -> bool:
    """Whether a period at index is followed by more of the same sentence."""
    if index >= len(tokens) or not tokens[index].is_period():
        return False
    after = skip_space(tokens, index + 1)
    if after == index + 1 or after >= len(tokens):
        return False
    return not tokens[after].text[:1].isupper()


def _read_span(tokens: list[Token], index: int) -> MeasurementSpan | None:
    """Read "[qualifier] <quantity> <unit>" starting at index."""
    start = index
    qualifier = ""

    if tokens[index].kind is TokenKind.WORD and tokens[index].text.lower() in QUALIFIERS:
        index = skip_space(tokens, index + 1)
        qualifier = render(tokens[start:index])

    if index >= len(tokens) or tokens[index].kind is not TokenKind.QUANTITY:
        return None

    quantity = tokens[index].text
    unit_index = skip_space(tokens, index + 1)

    end = _read_temperature_unit(tokens, unit_index)
    if end is not None:
        return MeasurementSpan(
            start=start,
            end=end,
            qualifier=qualifier,
            quantity=quantity,
            unit_text=render(tokens[unit_index:end]),
            unit=None,
            text=render(tokens[start:end]),
        )

    unit_read = read_unit(tokens, unit_index, trailing_period=False)
    if unit_read is None or unit_read.unit is None or unit_read.unit.metric:
        return None
    if len(normalize_alias(unit_read.text)) < 2:
        return None

    end = unit_read.end
    if _continues_sentence(tokens, end):
        # "tbsp. butter", "fl. oz. cream": the period is part of the unit
        end += 1

    return MeasurementSpan(
        start=start,
        end=end,
        qualifier=qualifier,
        quantity=quantity,
        unit_text=render(tokens[unit_index:end]),
        unit=unit_read.unit,
        text=render(tokens[start:end]),
    )


def _convert_temperature(span: MeasurementSpan) -> str:
    bounds = parse_range(span.quantity)
    if bounds:
        low, high = (fahrenheit_to_celsius(bound) for bound in bounds)
        return f"{span.qualifier}{low}-{high}°C"

    fahrenheit = parse_quantity(span.quantity)
    if fahrenheit is None:
        logger.debug(f"Unparseable temperature '{span.text}', leaving as is")
        return span.text
    return f"{span.qualifier}{fahrenheit_to_celsius(fahrenheit)}°C"


def _convert_measurement(span: MeasurementSpan) -> str:
    parsed = parse_ingredient(f"{span.quantity} {span.unit_text} {PLACEHOLDER}")
    converted = convert_ingredient_to_metric(parsed).converted
    if converted is None:
        logger.debug(f"Unparseable measurement '{span.text}', leaving as is")
        return span.text
    return f"{span.qualifier}{converted.removesuffix(f' {PLACEHOLDER}')}"


def convert_instruction_measurements(instruction_str: str) -> str:
    """
    Convert measurements inside an instruction sentence to metric.

    Handles volumes and weights ("2 cups" -> "473 ml") and oven
    temperatures ("350°F" -> "177°C") anywhere in the sentence. Text that
    is not a measurement is left exactly as it was.
    """
    tokens = tokenize(prefer_metric_measurement(instruction_str))
    parts: list[str] = []
    index = 0

    while index < len(tokens):
        span = _read_span(tokens, index)
        if span is None:
            parts.append(tokens[index].text)
            index += 1
            continue

        if span.unit is None:
            parts.append(_convert_temperature(span))
        else:
            parts.append(_convert_measurement(span))
        index = span.end

    result = _GLUED_METRIC_RE.sub(r"\1 \2", "".join(parts))
    return " ".join(result.split())


def clean_recipe_instructions(
    instructions: Iterable[str], convert_to_metric: bool = False
) -> list[str]:
    """Clean all instructions in a recipe, optionally converting to metric."""
    cleaned = (clean_instruction(instruction) for instruction in instructions)
    if convert_to_metric:
        cleaned = (convert_instruction_measurements(instruction) for instruction in cleaned)
    return [instruction for instruction in cleaned if instruction]
