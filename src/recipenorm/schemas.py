"""Request and response schemas for the normalization API."""

from pydantic import BaseModel, Field


class IngredientsRequest(BaseModel):
    """Raw ingredient lines to normalize."""

    ingredients: list[str]


class IngredientsResponse(BaseModel):
    """Normalized ingredient lines, empty lines dropped."""

    ingredients: list[str]


class InstructionsRequest(BaseModel):
    """Raw instruction steps to clean."""

    instructions: list[str]
    convert_to_metric: bool | None = Field(
        None, description="Rewrite measurements to metric. Defaults to the service setting."
    )


class InstructionsResponse(BaseModel):
    """Cleaned instruction steps, empty steps dropped."""

    instructions: list[str]


class RecipeNormalizeRequest(BaseModel):
    """A recipe's ingredient and instruction text, as handed over at import time."""

    recipe_id: str | None = None
    ingredients: list[str] = Field(default_factory=list)
    instructions: list[str] = Field(default_factory=list)
    convert_to_metric: bool | None = None


class RecipeNormalizeResponse(BaseModel):
    """Normalized recipe text."""

    recipe_id: str | None = None
    ingredients: list[str]
    instructions: list[str]


class ParseIngredientRequest(BaseModel):
    """A single ingredient line to break down."""

    line: str = Field(min_length=1)


class ParsedIngredientResponse(BaseModel):
    """Breakdown of a single ingredient line."""

    original: str
    cleaned: str
    quantity: float | None = None
    unit: str | None = None
    unit_family: str | None = None
    ingredient: str
    converted: str | None = None
    estimated_grams: float | None = Field(
        None, description="Approximate weight from the ingredient density table"
    )
