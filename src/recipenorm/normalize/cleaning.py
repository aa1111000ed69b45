"""Text cleanup applied before quantity and unit parsing."""

import re

from recipenorm.normalize.dual import prefer_weight_measurement
from recipenorm.normalize.quantity import format_number, parse_range
from recipenorm.normalize.tables import FRACTION_SLASH, VULGAR_FRACTIONS
from recipenorm.normalize.tokens import TokenKind, render, tokenize

_GLUED_FRACTION_RE = re.compile(rf"(\d)([{''.join(VULGAR_FRACTIONS)}])")
# "± 1/4 cup more if needed" up to the closing paren or end of line
_TOLERANCE_RE = re.compile(r"\s*±\s*[\d\s/.\-]+\s*[a-zA-Z.]+.*?(?=\)|$)")
_PARENTHETICAL_RE = re.compile(r"\s*\([^)]*\)")
_RANGE_REST_RE = re.compile(r"^\s+[A-Za-z.]+\s+\S")
_LABEL_RE = re.compile(r"^(?:(?:optional\s+)?[A-Za-z][\w\s]*:\s*)+", re.IGNORECASE)


def collapse_whitespace(text: str) -> str:
    return " ".join(text.split())


def normalize_fractions(text: str) -> str:
    """Replace vulgar fraction glyphs with ASCII fractions ("1½" -> "1 1/2")."""
    text = _GLUED_FRACTION_RE.sub(r"\1 \2", text)
    for glyph, fraction in VULGAR_FRACTIONS.items():
        text = text.replace(glyph, fraction)
    return text.replace(FRACTION_SLASH, "/")


def strip_annotations(text: str) -> str:
    """Drop "± X unit" tolerances and parenthetical notes."""
    text = _TOLERANCE_RE.sub("", text)
    return _PARENTHETICAL_RE.sub("", text)


def collapse_range(text: str) -> str:
    """
    Replace a leading range with its midpoint.

    "1-2 cups water" -> "1.5 cups water". The range must be followed by a
    unit word and more text; only the first range of the line is touched.
    """
    tokens = tokenize(text)
    if not tokens or tokens[0].kind is not TokenKind.QUANTITY:
        return text

    bounds = parse_range(tokens[0].text)
    if bounds is None:
        return text

    rest = render(tokens[1:])
    if not _RANGE_REST_RE.match(rest):
        return text

    low, high = bounds
    return f"{format_number((low + high) / 2)}{rest}"


def strip_label(text: str) -> str:
    """Remove leading labels such as "Optional Toppings:"."""
    return _LABEL_RE.sub("", text)


def clean_ingredient(raw: str) -> str:
    """
    Clean and normalize an ingredient line.

    Runs fraction normalization, label and annotation removal, dual
    measurement resolution and range collapsing. Cleaning an already clean
    line returns it unchanged.
    """
    cleaned = normalize_fractions(raw.strip())
    cleaned = strip_annotations(collapse_whitespace(cleaned)).strip()
    # labels may hide behind or contain notes, so strip them afterwards
    cleaned = strip_label(cleaned)
    cleaned = prefer_weight_measurement(cleaned)
    cleaned = collapse_range(cleaned)
    return collapse_whitespace(cleaned)


def clean_instruction(raw: str) -> str:
    """Normalize fractions and whitespace in an instruction step."""
    return collapse_whitespace(normalize_fractions(raw))
