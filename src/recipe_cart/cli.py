"""Command-line interface for recipe-cart."""

import argparse
import json
import sys
from pathlib import Path

from recipe_cart import __version__
from recipe_cart.catalog import CatalogRepository
from recipe_cart.core import process_recipe
from recipe_cart.exceptions import RecipeCartError
from recipe_cart.mapping import map_ingredients


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="recipe-cart",
        description="Turn a recipe into a grocery shopping list",
    )
    parser.add_argument("recipe", nargs="?", help="Recipe name, e.g. 'Paneer Butter Masala'")
    parser.add_argument(
        "--servings",
        type=int,
        default=2,
        help="Number of servings (default: 2)",
    )
    parser.add_argument(
        "--ingredients",
        help="Map a saved JSON ingredient list instead of calling the AI service",
    )
    parser.add_argument(
        "--catalog",
        help="Path to a products JSON file (default: packaged catalog)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )
    parser.add_argument(
        "--api-key",
        help="Gemini API key (default: GEMINI_API_KEY env var)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"recipe-cart {__version__}",
    )

    args = parser.parse_args(argv)
    if not args.recipe and not args.ingredients:
        parser.error("a recipe name or --ingredients is required")

    try:
        catalog = CatalogRepository.from_json(args.catalog) if args.catalog else CatalogRepository()
        if args.ingredients:
            payload = _load_json(args.ingredients)
            result = map_ingredients(payload, catalog=catalog)
        else:
            result = process_recipe(
                args.recipe,
                args.servings,
                catalog=catalog,
                api_key=args.api_key,
            )
    except (RecipeCartError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(result.model_dump_json(indent=2, by_alias=True, exclude_none=True))
    else:
        _print_formatted(result)

    return 0


def _load_json(path: str) -> object:
    try:
        return json.loads(Path(path).read_text(encoding="utf-8"))
    except OSError as e:
        raise ValueError(f"Cannot read ingredient file: {e}") from e
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in ingredient file: {e}") from e


def _print_formatted(result) -> None:
    """Print result in human-readable format."""
    print()
    title = getattr(result, "recipe_name", None)
    print(f"  recipe-cart{': ' + title if title else ''}")
    print()

    print("  Shopping list:")
    if not result.matched_items:
        print("    -")
    for item in result.matched_items:
        product = item.matched_product
        print(
            f"    {item.calculated_quantity_needed} x {product.name} ({product.pack_size})"
            f"  <- {item.original_ingredient_name}, {item.original_quantity}"
        )
        if item.calculation_notes:
            print(f"       {item.calculation_notes}")

    if result.unavailable_items:
        print()
        print("  Unavailable:")
        for item in result.unavailable_items:
            print(f"    {item.original_ingredient_name} ({item.original_quantity}): {item.reason}")

    steps = getattr(result, "recipe_steps", None)
    if steps:
        print()
        print("  Steps:")
        for number, step in enumerate(steps, start=1):
            print(f"    {number}. {step}")

    print()


if __name__ == "__main__":
    sys.exit(main())
