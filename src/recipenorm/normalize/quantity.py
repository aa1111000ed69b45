"""Quantity parsing and number formatting."""

import math
import re

# Regex fragments shared with the scanner. Order inside the alternations is
# the disambiguation policy: mixed number, then fraction, then plain number.
NUMBER_PATTERN = r"(?:\d+(?:\.\d+)?|\.\d+)"
FRACTION_PATTERN = r"\d+/\d+"
MIXED_PATTERN = r"\d+[\s-]+\d+/\d+"
BOUND_PATTERN = rf"(?:{FRACTION_PATTERN}|{NUMBER_PATTERN})"
AMOUNT_PATTERN = rf"(?:{MIXED_PATTERN}|{BOUND_PATTERN})"
RANGE_SEPARATOR_PATTERN = r"\s*[-–]\s*"
QUANTITY_PATTERN = rf"{AMOUNT_PATTERN}(?:{RANGE_SEPARATOR_PATTERN}{BOUND_PATTERN})?"

_MIXED_RE = re.compile(r"^(\d+)[\s-]+(\d+)/(\d+)$")
_FRACTION_RE = re.compile(r"^(\d+)/(\d+)$")
_NUMBER_RE = re.compile(rf"^{NUMBER_PATTERN}$")
_RANGE_RE = re.compile(rf"^({AMOUNT_PATTERN}){RANGE_SEPARATOR_PATTERN}({BOUND_PATTERN})$")


def _divide(numerator: str, denominator: str) -> float | None:
    denom = int(denominator)
    if denom == 0:
        return None
    return int(numerator) / denom


def parse_range(quantity_str: str | None) -> tuple[float, float] | None:
    """
    Parse a range like "1-2" or "1/2 - 3/4" into its two bounds.

    Mixed numbers written with a hyphen ("1-1/2") are not ranges.
    """
    if not quantity_str:
        return None

    value = quantity_str.strip()
    if _MIXED_RE.match(value):
        return None

    range_match = _RANGE_RE.match(value)
    if not range_match:
        return None

    low = parse_quantity(range_match.group(1))
    high = parse_quantity(range_match.group(2))
    if low is None or high is None:
        return None
    return low, high


def parse_quantity(quantity_str: str | None) -> float | None:
    """
    Parse a quantity string into a float.

    Handles formats like:
    - "2"
    - "1.5"
    - "1/2"
    - "1 1/2" or "1-1/2" (one and a half)
    - "2-3" (range, returns the midpoint)

    Returns None for anything that is not a number, including zero
    denominators. No rounding is applied.
    """
    if not quantity_str:
        return None

    value = quantity_str.strip()
    if not value:
        return None

    mixed_match = _MIXED_RE.match(value)
    if mixed_match:
        fraction = _divide(mixed_match.group(2), mixed_match.group(3))
        if fraction is None:
            return None
        return int(mixed_match.group(1)) + fraction

    bounds = parse_range(value)
    if bounds:
        low, high = bounds
        return (low + high) / 2

    frac_match = _FRACTION_RE.match(value)
    if frac_match:
        return _divide(frac_match.group(1), frac_match.group(2))

    if _NUMBER_RE.match(value):
        return float(value)

    return None


def format_number(value: float) -> str:
    """Format with two decimals, dropping trailing zeros ("1.50" -> "1.5")."""
    return f"{value:.2f}".rstrip("0").rstrip(".")


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards positive infinity."""
    return math.floor(value + 0.5)
