"""Collapse dual measurements ("10 ml / 6 g") to a single preferred one.

Ingredient lines and instruction sentences use different preferences, so
each gets its own policy function.
"""

from dataclasses import dataclass

from recipenorm.logging_config import get_logger
from recipenorm.normalize.tables import UnitToken
from recipenorm.normalize.tokens import Token, TokenKind, read_unit, render, skip_space, tokenize

logger = get_logger(__name__)


@dataclass(frozen=True)
class Measurement:
    """One side of a dual measurement."""

    quantity: str
    unit_text: str
    unit: UnitToken | None

    def __str__(self) -> str:
        return f"{self.quantity.strip()} {self.unit_text.strip()}"


@dataclass(frozen=True)
class DualMeasurement:
    first: Measurement
    second: Measurement
    end: int


def _read_measurement(
    tokens: list[Token], index: int, trailing_period: bool
) -> tuple[Measurement, int] | None:
    if index >= len(tokens) or tokens[index].kind is not TokenKind.QUANTITY:
        return None

    unit_read = read_unit(tokens, skip_space(tokens, index + 1), trailing_period=trailing_period)
    if unit_read is None:
        return None

    measurement = Measurement(
        quantity=tokens[index].text, unit_text=unit_read.text, unit=unit_read.unit
    )
    return measurement, unit_read.end


def _read_dual(tokens: list[Token], index: int, trailing_period: bool) -> DualMeasurement | None:
    """Read "<qty> <unit> / <qty> <unit>" starting at index."""
    first = _read_measurement(tokens, index, trailing_period)
    if first is None:
        return None

    slash = skip_space(tokens, first[1])
    if slash >= len(tokens) or tokens[slash].kind is not TokenKind.SLASH:
        return None

    second = _read_measurement(tokens, skip_space(tokens, slash + 1), trailing_period)
    if second is None:
        return None

    return DualMeasurement(first=first[0], second=second[0], end=second[1])


def prefer_weight_measurement(line: str) -> str:
    """
    Resolve a leading dual measurement on an ingredient line.

    "10 ml / 6 g active dry yeast" -> "6 g active dry yeast". A side in
    grams or kilograms wins; otherwise the second side is kept. Only a dual
    measurement at the start of the line, followed by ingredient text, is
    considered.
    """
    tokens = tokenize(line)
    dual = _read_dual(tokens, 0, trailing_period=True)
    if dual is None:
        return line

    if dual.end >= len(tokens) or tokens[dual.end].kind is not TokenKind.SPACE:
        return line
    rest = render(tokens[dual.end :]).strip()
    if not rest:
        return line

    first_is_weight = dual.first.unit is not None and dual.first.unit.is_metric_weight
    second_is_weight = dual.second.unit is not None and dual.second.unit.is_metric_weight

    if second_is_weight:
        chosen = dual.second
    elif first_is_weight:
        chosen = dual.first
    else:
        chosen = dual.second

    logger.debug(f"Dual measurement '{dual.first}' / '{dual.second}' -> '{chosen}'")
    return f"{chosen} {rest}"


def prefer_metric_measurement(sentence: str) -> str:
    """
    Resolve every dual measurement inside an instruction sentence.

    "Whisk in 118 ml /120ml milk" -> "Whisk in 120 ml milk". Both sides
    must use known units. A metric side (ml, l, g, kg, ...) wins over an
    imperial one; otherwise the second side is kept.
    """
    tokens = tokenize(sentence)
    parts: list[str] = []
    index = 0

    while index < len(tokens):
        dual = _read_dual(tokens, index, trailing_period=False)
        if dual is None or dual.first.unit is None or dual.second.unit is None:
            parts.append(tokens[index].text)
            index += 1
            continue

        if dual.second.unit.metric:
            chosen = dual.second
        elif dual.first.unit.metric:
            chosen = dual.first
        else:
            chosen = dual.second

        parts.append(str(chosen))
        index = dual.end

    return "".join(parts)
