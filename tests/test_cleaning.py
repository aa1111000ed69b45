"""Tests for ingredient and instruction text cleanup."""

import pytest

from recipenorm.normalize.cleaning import (
    clean_ingredient,
    clean_instruction,
    collapse_range,
    normalize_fractions,
    strip_annotations,
    strip_label,
)


class TestNormalizeFractions:
    """Tests for normalize_fractions function."""

    def test_vulgar_glyphs(self):
        assert normalize_fractions("¾ cup butter") == "3/4 cup butter"
        assert normalize_fractions("⅓ cup sugar, ⅛ tsp salt") == "1/3 cup sugar, 1/8 tsp salt"

    def test_glyph_after_digit(self):
        """Test a glyph glued to a whole number becomes a mixed number."""
        assert normalize_fractions("1½ cups") == "1 1/2 cups"
        assert normalize_fractions("1 ½ cups") == "1 1/2 cups"

    def test_fraction_slash(self):
        assert normalize_fractions("1⁄2 cup") == "1/2 cup"

    def test_plain_text_unchanged(self):
        assert normalize_fractions("2 cups flour") == "2 cups flour"


class TestStripAnnotations:
    """Tests for strip_annotations function."""

    def test_tolerance_inside_parentheses(self):
        assert strip_annotations("2 cups flour (± 1/4 cup)") == "2 cups flour"

    def test_tolerance_at_end(self):
        assert strip_annotations("3 cups stock ± 1/2 cup if needed") == "3 cups stock"

    def test_parenthetical_note(self):
        assert strip_annotations("1 cup milk (whole or 2%)") == "1 cup milk"
        assert strip_annotations("2 (14 oz) cans tomatoes") == "2 cans tomatoes"


class TestCollapseRange:
    """Tests for collapse_range function."""

    def test_range_to_midpoint(self):
        assert collapse_range("1-2 cups water") == "1.5 cups water"
        assert collapse_range("2 - 3 tbsp oil") == "2.5 tbsp oil"
        assert collapse_range("1–2 cups water") == "1.5 cups water"

    def test_midpoint_formatting(self):
        assert collapse_range("2-4 cloves garlic") == "3 cloves garlic"
        assert collapse_range("1/4-1/2 tsp pepper") == "0.38 tsp pepper"

    def test_mixed_number_untouched(self):
        assert collapse_range("1-1/2 cups milk") == "1-1/2 cups milk"
        assert collapse_range("1 - 1/2 cups milk") == "1 - 1/2 cups milk"

    def test_range_needs_unit_and_ingredient(self):
        assert collapse_range("1-2 eggs") == "1-2 eggs"

    def test_no_range(self):
        assert collapse_range("2 cups flour") == "2 cups flour"
        assert collapse_range("Salt to taste") == "Salt to taste"


class TestStripLabel:
    """Tests for strip_label function."""

    def test_optional_label(self):
        assert strip_label("Optional Toppings: 1 cup berries") == "1 cup berries"

    def test_section_label(self):
        assert strip_label("For the sauce: 2 tbsp soy sauce") == "2 tbsp soy sauce"

    def test_nested_labels(self):
        assert strip_label("Topping: Crumble: 1 cup oats") == "1 cup oats"

    def test_no_label(self):
        assert strip_label("2 cups flour") == "2 cups flour"


class TestCleanIngredient:
    """Tests for clean_ingredient function."""

    def test_dual_measurement_prefers_weight(self):
        assert clean_ingredient("10 ml / 6 g active dry yeast") == "6 g active dry yeast"

    def test_vulgar_fraction_and_note(self):
        assert clean_ingredient("¾ cup butter (softened)") == "3/4 cup butter"

    def test_whitespace(self):
        assert clean_ingredient("  2   cups\tflour ") == "2 cups flour"

    def test_label_before_range(self):
        assert clean_ingredient("Topping: 1-2 cups cream") == "1.5 cups cream"

    def test_label_with_note(self):
        assert clean_ingredient("Optional Toppings (for serving): 1 cup berries") == "1 cup berries"
        assert clean_ingredient("(Optional) Topping: 1 cup sugar") == "1 cup sugar"

    def test_label_note_and_dual(self):
        assert (
            clean_ingredient("For the dough: 10 ml / 6 g (2 tsp) active dry yeast")
            == "6 g active dry yeast"
        )

    def test_tolerance_with_label_and_range(self):
        assert clean_ingredient("Sauce: 2 cups stock ± 1/2 cup") == "2 cups stock"
        assert clean_ingredient("1-2 cups cream (± 1/4 cup), whipped") == "1.5 cups cream, whipped"

    def test_only_annotation_becomes_empty(self):
        assert clean_ingredient("(optional)") == ""

    @pytest.mark.parametrize(
        "raw",
        [
            "1-2 cups water",
            "¾ cup butter (softened)",
            "10 ml / 6 g active dry yeast",
            "Optional Toppings: 1 cup berries",
            "Salt to taste",
            "2 cups flour (± 1/4 cup)",
            "1 1/2 cups milk, divided",
            "1½ cups sugar",
            "Optional Toppings (for serving): 1 cup berries",
            "(Optional) Topping: 1 cup sugar",
            "For the dough: 10 ml / 6 g (2 tsp) active dry yeast",
            "Sauce: 2 cups stock ± 1/2 cup",
            "1-2 cups cream (± 1/4 cup), whipped",
        ],
    )
    def test_idempotent(self, raw):
        """Test cleaning an already clean line changes nothing."""
        once = clean_ingredient(raw)
        assert clean_ingredient(once) == once


class TestCleanInstruction:
    """Tests for clean_instruction function."""

    def test_fractions_and_whitespace(self):
        assert clean_instruction("  Add ½ cup   milk ") == "Add 1/2 cup milk"

    def test_measurements_not_converted(self):
        assert clean_instruction("Preheat oven to 350°F.") == "Preheat oven to 350°F."
