"""Tests for the recipe text scanner."""

import pytest

from recipenorm.normalize.tokens import TokenKind, read_unit, render, tokenize


def kinds(text: str) -> list[tuple[TokenKind, str]]:
    return [(token.kind, token.text) for token in tokenize(text)]


class TestTokenize:
    """Tests for tokenize function."""

    @pytest.mark.parametrize(
        "text",
        [
            "1 1/2 cups milk, divided",
            "Preheat oven to 350°F.",
            "In118 ml of milk",
            "10 ml / 6 g active dry yeast",
            "Salt & pepper (to taste)\n",
        ],
    )
    def test_render_reproduces_input(self, text):
        assert render(tokenize(text)) == text

    def test_mixed_number_is_one_token(self):
        assert kinds("1 1/2 cups") == [
            (TokenKind.QUANTITY, "1 1/2"),
            (TokenKind.SPACE, " "),
            (TokenKind.WORD, "cups"),
        ]

    def test_spaced_hyphen_mixed_number(self):
        assert kinds("1 - 1/2 cups")[0] == (TokenKind.QUANTITY, "1 - 1/2")

    def test_range_is_one_token(self):
        assert kinds("1-2 cups")[0] == (TokenKind.QUANTITY, "1-2")
        assert kinds("20 - 25 minutes")[0] == (TokenKind.QUANTITY, "20 - 25")

    def test_glued_word_and_number(self):
        assert kinds("In118 ml") == [
            (TokenKind.WORD, "In"),
            (TokenKind.QUANTITY, "118"),
            (TokenKind.SPACE, " "),
            (TokenKind.WORD, "ml"),
        ]

    def test_degree_marker(self):
        assert kinds("350°F") == [(TokenKind.QUANTITY, "350"), (TokenKind.DEGREE, "°F")]
        assert kinds("180 °C")[-1] == (TokenKind.DEGREE, "°C")

    def test_slash_between_measurements(self):
        assert [kind for kind, _ in kinds("118 ml/120ml")] == [
            TokenKind.QUANTITY,
            TokenKind.SPACE,
            TokenKind.WORD,
            TokenKind.SLASH,
            TokenKind.QUANTITY,
            TokenKind.WORD,
        ]

    def test_token_offsets(self):
        tokens = tokenize("2 cups")
        assert [token.start for token in tokens] == [0, 1, 2]


class TestReadUnit:
    """Tests for read_unit function."""

    def test_single_word(self):
        result = read_unit(tokenize("cups flour"), 0)
        assert result.text == "cups"
        assert result.unit is not None
        assert result.end == 1

    def test_two_word_alias(self):
        result = read_unit(tokenize("fl. oz. cream"), 0)
        assert result.text == "fl. oz."
        assert result.unit.factor == pytest.approx(29.574)
        assert result.end == 5

    def test_trailing_period(self):
        tokens = tokenize("tbsp. butter")
        assert read_unit(tokens, 0).text == "tbsp."
        assert read_unit(tokens, 0, trailing_period=False).text == "tbsp"

    def test_unknown_word(self):
        result = read_unit(tokenize("smidge of salt"), 0)
        assert result.text == "smidge"
        assert result.unit is None
        assert result.end == 1

    def test_requires_word(self):
        assert read_unit(tokenize("2 cups"), 0) is None
        assert read_unit(tokenize("cups"), 5) is None
