"""Mapping engine: turn parsed ingredients into a shopping list."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pydantic import TypeAdapter, ValidationError

from recipe_cart.catalog.repository import BaseCatalog, CatalogRepository
from recipe_cart.exceptions import IngredientContractError
from recipe_cart.mapping.calculator import DEFAULT_CONFIG, CalculatorConfig, calculate_quantity
from recipe_cart.mapping.matcher import IngredientMatcher
from recipe_cart.mapping.types import CalculationFailure
from recipe_cart.schema import MappedItem, MappingResult, ParsedIngredient, UnavailableItem

logger = logging.getLogger(__name__)

PRODUCT_NOT_FOUND = "Product not found in database"

_INGREDIENT_LIST = TypeAdapter(list[ParsedIngredient])


class MappingEngine:
    """Match each ingredient to a product and compute the packs to buy.

    Ingredients are processed one by one in input order. A failure for one
    ingredient becomes an `UnavailableItem` and never affects the others.
    """

    def __init__(self, catalog: BaseCatalog, calculator_config: CalculatorConfig | None = None):
        self.catalog = catalog
        self.calculator_config = calculator_config or DEFAULT_CONFIG
        self.matcher = IngredientMatcher(catalog)

    def map_ingredients(self, ingredients: Iterable[ParsedIngredient]) -> MappingResult:
        result = MappingResult()

        for ingredient in ingredients:
            item = self.map_one(ingredient)
            if isinstance(item, MappedItem):
                result.matched_items.append(item)
            else:
                result.unavailable_items.append(item)

        logger.info(
            "mapping complete: %d matched, %d unavailable",
            len(result.matched_items),
            len(result.unavailable_items),
        )
        return result

    def map_one(self, ingredient: ParsedIngredient) -> MappedItem | UnavailableItem:
        original_quantity = ingredient.display_quantity

        product = self.matcher.find_product(ingredient.name)
        if product is None:
            logger.info("product not found for %r", ingredient.name)
            return UnavailableItem(
                original_ingredient_name=ingredient.name,
                original_quantity=original_quantity,
                reason=PRODUCT_NOT_FOUND,
            )

        outcome = calculate_quantity(
            ingredient.name,
            ingredient.quantity,
            product,
            self.calculator_config,
        )
        if isinstance(outcome, CalculationFailure) or outcome.quantity <= 0:
            detail = outcome.reason if isinstance(outcome, CalculationFailure) else "non-positive quantity"
            logger.info(
                "found %r for %r but quantity calculation failed: %s",
                product.name,
                ingredient.name,
                detail,
            )
            return UnavailableItem(
                original_ingredient_name=ingredient.name,
                original_quantity=original_quantity,
                reason=(
                    f"Product found ('{product.name}'), but quantity/unit calculation failed "
                    f"({detail}; Recipe: {original_quantity}, Product: {product.pack_size}). "
                    "Requires manual check."
                ),
            )

        logger.debug(
            "matched %r to %r, need %d unit(s)",
            ingredient.name,
            product.name,
            outcome.quantity,
        )
        return MappedItem(
            original_ingredient_name=ingredient.name,
            original_quantity=original_quantity,
            matched_product=product,
            calculated_quantity_needed=outcome.quantity,
            calculation_notes=outcome.notes,
        )


def parse_ingredients(payload: object) -> list[ParsedIngredient]:
    """Validate raw extraction output against the ingredient contract.

    Raises:
        IngredientContractError: If payload is not a list of
            `{name, quantity: {value, unit}}` objects with string fields.
    """

    if isinstance(payload, list) and all(isinstance(item, ParsedIngredient) for item in payload):
        return list(payload)
    try:
        return _INGREDIENT_LIST.validate_python(payload)
    except ValidationError as exc:
        raise IngredientContractError(f"Malformed ingredient list: {exc}") from exc


def map_ingredients(
    ingredients: object,
    *,
    catalog: BaseCatalog | None = None,
    calculator_config: CalculatorConfig | None = None,
) -> MappingResult:
    """Map raw or parsed ingredients to catalog products.

    Uses the packaged catalog when `catalog` is not given.
    """

    engine = MappingEngine(catalog or CatalogRepository(), calculator_config=calculator_config)
    return engine.map_ingredients(parse_ingredients(ingredients))
