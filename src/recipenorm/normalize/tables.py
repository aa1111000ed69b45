"""Unit alias and ingredient density lookup tables."""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from rapidfuzz import fuzz, process

from recipenorm.config import get_settings
from recipenorm.logging_config import get_logger

logger = get_logger(__name__)


# =============================================================================
# Unit Conversion Tables
# =============================================================================

# Volume conversions (base unit: ml)
VOLUME_UNITS: Mapping[str, float] = MappingProxyType(
    {
        # US customary
        "cup": 236.588,
        "cups": 236.588,
        "c": 236.588,
        "tablespoon": 14.787,
        "tablespoons": 14.787,
        "tbsp": 14.787,
        "tbsps": 14.787,
        "tbs": 14.787,
        "tb": 14.787,
        "teaspoon": 4.929,
        "teaspoons": 4.929,
        "tsp": 4.929,
        "tsps": 4.929,
        "t": 4.929,
        "fl oz": 29.574,
        "fluid ounce": 29.574,
        "fluid ounces": 29.574,
        "pint": 473.176,
        "pints": 473.176,
        "pt": 473.176,
        "quart": 946.353,
        "quarts": 946.353,
        "qt": 946.353,
        "gallon": 3785.41,
        "gallons": 3785.41,
        "gal": 3785.41,
        # Metric
        "ml": 1.0,
        "milliliter": 1.0,
        "milliliters": 1.0,
        "millilitre": 1.0,
        "millilitres": 1.0,
        "cl": 10.0,
        "centiliter": 10.0,
        "centiliters": 10.0,
        "dl": 100.0,
        "deciliter": 100.0,
        "deciliters": 100.0,
        "l": 1000.0,
        "liter": 1000.0,
        "liters": 1000.0,
        "litre": 1000.0,
        "litres": 1000.0,
    }
)

# Weight conversions (base unit: g)
WEIGHT_UNITS: Mapping[str, float] = MappingProxyType(
    {
        # Imperial
        "oz": 28.3495,
        "ounce": 28.3495,
        "ounces": 28.3495,
        "lb": 453.592,
        "lbs": 453.592,
        "pound": 453.592,
        "pounds": 453.592,
        # Metric
        "mg": 0.001,
        "milligram": 0.001,
        "milligrams": 0.001,
        "g": 1.0,
        "gram": 1.0,
        "grams": 1.0,
        "kg": 1000.0,
        "kilogram": 1000.0,
        "kilograms": 1000.0,
    }
)

METRIC_UNITS: frozenset[str] = frozenset(
    {
        "ml", "milliliter", "milliliters", "millilitre", "millilitres",
        "cl", "centiliter", "centiliters",
        "dl", "deciliter", "deciliters",
        "l", "liter", "liters", "litre", "litres",
        "mg", "milligram", "milligrams",
        "g", "gram", "grams",
        "kg", "kilogram", "kilograms",
    }
)

# Checked before the lowercase tables; "T" is the cookbook tablespoon.
CASE_SENSITIVE_UNITS: Mapping[str, str] = MappingProxyType(
    {
        "T": "tbsp",
        "t": "tsp",
    }
)

VULGAR_FRACTIONS: Mapping[str, str] = MappingProxyType(
    {
        "¼": "1/4",
        "½": "1/2",
        "¾": "3/4",
        "⅓": "1/3",
        "⅔": "2/3",
        "⅛": "1/8",
        "⅜": "3/8",
        "⅝": "5/8",
        "⅞": "7/8",
    }
)

FRACTION_SLASH = "⁄"

# Common ingredient densities (g/ml) for volume to weight estimates
INGREDIENT_DENSITIES: Mapping[str, float] = MappingProxyType(
    {
        # Liquids
        "water": 1.0,
        "milk": 1.03,
        "cream": 1.01,
        "oil": 0.92,
        "vegetable oil": 0.92,
        "olive oil": 0.92,
        "honey": 1.42,
        "syrup": 1.37,
        "maple syrup": 1.37,
        "molasses": 1.4,
        # Dry ingredients
        "flour": 0.53,
        "all-purpose flour": 0.53,
        "bread flour": 0.55,
        "cake flour": 0.45,
        "sugar": 0.85,
        "granulated sugar": 0.85,
        "brown sugar": 0.9,
        "powdered sugar": 0.56,
        "confectioners sugar": 0.56,
        "salt": 1.22,
        "table salt": 1.22,
        "kosher salt": 0.85,
        # Fats
        "butter": 0.96,
        "margarine": 0.96,
        "shortening": 0.82,
        "lard": 0.92,
        # Powders
        "baking powder": 0.48,
        "baking soda": 0.96,
        "cocoa": 0.53,
        "cocoa powder": 0.53,
    }
)


class UnitFamily(str, Enum):
    """Canonical unit family a unit alias converts into."""

    VOLUME = "volume"
    WEIGHT = "weight"


@dataclass(frozen=True)
class UnitToken:
    """A unit alias resolved against the conversion tables."""

    alias: str
    family: UnitFamily
    factor: float  # to ml for volume, to g for weight
    metric: bool

    @property
    def is_metric_weight(self) -> bool:
        return self.metric and self.family is UnitFamily.WEIGHT


# =============================================================================
# Lookup Functions
# =============================================================================


def normalize_alias(unit: str) -> str:
    """Strip periods and collapse inner whitespace ("fl. oz." -> "fl oz")."""
    return " ".join(unit.replace(".", " ").split())


def resolve_unit(unit: str | None) -> UnitToken | None:
    """
    Resolve a unit alias to its family and conversion factor.

    Returns None when the alias is not in any table.
    """
    if not unit:
        return None

    alias = normalize_alias(unit)
    key = CASE_SENSITIVE_UNITS.get(alias, alias.lower())

    if key in VOLUME_UNITS:
        return UnitToken(
            alias=unit, family=UnitFamily.VOLUME, factor=VOLUME_UNITS[key], metric=key in METRIC_UNITS
        )

    if key in WEIGHT_UNITS:
        return UnitToken(
            alias=unit, family=UnitFamily.WEIGHT, factor=WEIGHT_UNITS[key], metric=key in METRIC_UNITS
        )

    return None


def get_ingredient_density(ingredient_name: str) -> tuple[float, str | None]:
    """
    Look up the density (g/ml) of an ingredient.

    Tries an exact match, then the longest known name contained in the
    ingredient, then a fuzzy match. Falls back to the configured default.

    Returns:
        Tuple of (density, matched table key or None for the default)
    """
    settings = get_settings()
    name = " ".join(ingredient_name.lower().split())

    if not name:
        return settings.default_ingredient_density, None

    if name in INGREDIENT_DENSITIES:
        return INGREDIENT_DENSITIES[name], name

    contained = [key for key in INGREDIENT_DENSITIES if key in name]
    if contained:
        key = max(contained, key=len)
        return INGREDIENT_DENSITIES[key], key

    match = process.extractOne(
        name,
        list(INGREDIENT_DENSITIES),
        scorer=fuzz.token_set_ratio,
        score_cutoff=settings.density_match_threshold,
    )
    if match:
        key, score, _ = match
        logger.debug(f"Fuzzy density match '{name}' -> '{key}' (score={score:.0f})")
        return INGREDIENT_DENSITIES[key], key

    return settings.default_ingredient_density, None
