"""Script to normalize the ingredients and instructions of a recipe JSON file.

The file must hold an object with "ingredients" and "instructions" lists of
strings (other keys are passed through untouched).

Run with: uv run python scripts/normalize_recipe.py recipe.json
Rewrite instructions too: uv run python scripts/normalize_recipe.py recipe.json --metric-instructions
"""

import argparse
import json
import sys
from pathlib import Path

from recipenorm.logging_config import configure_logging, get_logger
from recipenorm.normalize import clean_recipe_instructions, convert_recipe_ingredients

configure_logging(log_level="WARNING")
logger = get_logger(__name__)


def normalize_recipe_file(path: Path, metric_instructions: bool) -> dict:
    """Load a recipe file and return it with normalized text."""
    recipe = json.loads(path.read_text(encoding="utf-8"))

    recipe["ingredients"] = convert_recipe_ingredients(recipe.get("ingredients", []))
    recipe["instructions"] = clean_recipe_instructions(
        recipe.get("instructions", []), convert_to_metric=metric_instructions
    )
    return recipe


def main():
    parser = argparse.ArgumentParser(description="Normalize recipe measurements to metric")
    parser.add_argument("path", type=Path, help="Recipe JSON file")
    parser.add_argument(
        "--metric-instructions",
        "-m",
        action="store_true",
        help="Also rewrite measurements inside instructions",
    )
    parser.add_argument("--indent", type=int, default=2, help="JSON output indentation")

    args = parser.parse_args()

    try:
        recipe = normalize_recipe_file(args.path, args.metric_instructions)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Could not read recipe file {args.path}: {e}")
        sys.exit(1)

    print(json.dumps(recipe, indent=args.indent, ensure_ascii=False))


if __name__ == "__main__":
    main()
