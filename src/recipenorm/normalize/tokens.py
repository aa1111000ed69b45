"""Scanner splitting recipe text into quantity, unit and text tokens."""

import re
from dataclasses import dataclass
from enum import Enum

from recipenorm.normalize.quantity import QUANTITY_PATTERN
from recipenorm.normalize.tables import UnitToken, resolve_unit


class TokenKind(str, Enum):
    """Token classes, listed in match precedence order."""

    QUANTITY = "QUANTITY"
    WORD = "WORD"
    DEGREE = "DEGREE"
    SLASH = "SLASH"
    SPACE = "SPACE"
    OTHER = "OTHER"


_TOKEN_SPEC = [
    (TokenKind.QUANTITY, QUANTITY_PATTERN),
    (TokenKind.WORD, r"[A-Za-z]+"),
    (TokenKind.DEGREE, r"°(?:[ \t]?[FfCc](?![A-Za-z]))?"),
    (TokenKind.SLASH, r"/"),
    (TokenKind.SPACE, r"\s+"),
    (TokenKind.OTHER, r"."),
]

_TOKEN_RE = re.compile(
    "|".join(f"(?P<{kind.value}>{pattern})" for kind, pattern in _TOKEN_SPEC),
    re.DOTALL,
)


@dataclass(frozen=True)
class Token:
    """A slice of the input text with its class."""

    kind: TokenKind
    text: str
    start: int

    def is_period(self) -> bool:
        return self.kind is TokenKind.OTHER and self.text == "."


@dataclass(frozen=True)
class UnitRead:
    """Result of reading a unit word at a token position."""

    text: str
    unit: UnitToken | None
    end: int  # index of the first token after the unit


def tokenize(text: str) -> list[Token]:
    """
    Split text into tokens.

    Joining the token texts always gives back the input unchanged, so
    callers can rewrite single spans and re-emit everything else verbatim.
    """
    return [
        Token(kind=TokenKind(match.lastgroup), text=match.group(), start=match.start())
        for match in _TOKEN_RE.finditer(text)
    ]


def render(tokens: list[Token]) -> str:
    """Join tokens back into text."""
    return "".join(token.text for token in tokens)


def skip_space(tokens: list[Token], index: int) -> int:
    """Return the index of the first non-space token at or after index."""
    while index < len(tokens) and tokens[index].kind is TokenKind.SPACE:
        index += 1
    return index


def _period_at(tokens: list[Token], index: int) -> bool:
    return index < len(tokens) and tokens[index].is_period()


def read_unit(tokens: list[Token], index: int, trailing_period: bool = True) -> UnitRead | None:
    """
    Read a unit alias starting at a WORD token.

    Two-word aliases ("fl oz", "fl. oz.", "fluid ounces") are tried before
    single words. A trailing period ("tbsp.") is only swallowed when
    trailing_period is set; in running prose it usually ends the sentence.

    Returns None when there is no WORD at index. An alias missing from the
    tables comes back with unit=None and only the bare word consumed.
    """
    if index >= len(tokens) or tokens[index].kind is not TokenKind.WORD:
        return None

    candidates = []
    second = index + 1
    if _period_at(tokens, second):
        second += 1
    if second < len(tokens) and tokens[second].kind is TokenKind.SPACE:
        second += 1
    if second > index + 1 and second < len(tokens) and tokens[second].kind is TokenKind.WORD:
        candidates.append(second + 1)
    candidates.append(index + 1)

    for end in candidates:
        if trailing_period and _period_at(tokens, end):
            end += 1
        text = render(tokens[index:end])
        unit = resolve_unit(text)
        if unit is not None:
            return UnitRead(text=text, unit=unit, end=end)

    return UnitRead(text=tokens[index].text, unit=None, end=index + 1)
