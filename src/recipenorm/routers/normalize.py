"""API routes for normalizing recipe ingredient and instruction text."""

from fastapi import APIRouter

from recipenorm.config import get_settings
from recipenorm.logging_config import LoggingContext, get_logger
from recipenorm.normalize import (
    clean_ingredient,
    clean_recipe_instructions,
    convert_ingredient_to_metric,
    convert_recipe_ingredients,
    estimate_weight_grams,
    parse_ingredient,
)
from recipenorm.schemas import (
    IngredientsRequest,
    IngredientsResponse,
    InstructionsRequest,
    InstructionsResponse,
    ParsedIngredientResponse,
    ParseIngredientRequest,
    RecipeNormalizeRequest,
    RecipeNormalizeResponse,
)

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1/normalize", tags=["normalize"])


def _convert_to_metric(requested: bool | None) -> bool:
    if requested is None:
        return get_settings().convert_instructions_to_metric
    return requested


# =============================================================================
# Normalization Endpoints
# =============================================================================


@router.post("/ingredients", response_model=IngredientsResponse)
async def normalize_ingredients(request: IngredientsRequest) -> IngredientsResponse:
    """
    Clean ingredient lines and convert their quantities to metric.

    Lines without a recognizable quantity or unit come back unchanged; lines
    that are empty after cleaning are dropped.
    """
    logger.info(f"Normalizing {len(request.ingredients)} ingredient lines")
    return IngredientsResponse(ingredients=convert_recipe_ingredients(request.ingredients))


@router.post("/instructions", response_model=InstructionsResponse)
async def normalize_instructions(request: InstructionsRequest) -> InstructionsResponse:
    """Clean instruction steps, optionally rewriting measurements to metric."""
    convert_to_metric = _convert_to_metric(request.convert_to_metric)
    logger.info(
        f"Cleaning {len(request.instructions)} instructions: convert_to_metric={convert_to_metric}"
    )
    return InstructionsResponse(
        instructions=clean_recipe_instructions(request.instructions, convert_to_metric)
    )


@router.post("/recipe", response_model=RecipeNormalizeResponse)
async def normalize_recipe(request: RecipeNormalizeRequest) -> RecipeNormalizeResponse:
    """Normalize all ingredient and instruction text of one recipe."""
    convert_to_metric = _convert_to_metric(request.convert_to_metric)

    with LoggingContext(recipe_id=request.recipe_id):
        logger.info(
            f"Normalizing recipe: ingredients={len(request.ingredients)}, "
            f"instructions={len(request.instructions)}, convert_to_metric={convert_to_metric}"
        )
        ingredients = convert_recipe_ingredients(request.ingredients)
        instructions = clean_recipe_instructions(request.instructions, convert_to_metric)

    return RecipeNormalizeResponse(
        recipe_id=request.recipe_id,
        ingredients=ingredients,
        instructions=instructions,
    )


@router.post("/parse", response_model=ParsedIngredientResponse)
async def parse_ingredient_line(request: ParseIngredientRequest) -> ParsedIngredientResponse:
    """
    Break a single ingredient line down into quantity, unit and name.

    Also reports an approximate weight in grams, using the ingredient
    density table for volume measurements.
    """
    cleaned = clean_ingredient(request.line)
    parsed = convert_ingredient_to_metric(parse_ingredient(cleaned))

    return ParsedIngredientResponse(
        original=request.line,
        cleaned=cleaned,
        quantity=parsed.quantity,
        unit=parsed.unit.alias if parsed.unit else None,
        unit_family=parsed.unit.family.value if parsed.unit else None,
        ingredient=parsed.ingredient,
        converted=parsed.converted,
        estimated_grams=estimate_weight_grams(parsed),
    )
