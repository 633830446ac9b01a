"""Ingredient-to-product mapping for recipe-cart."""

from recipe_cart.mapping.calculator import CalculatorConfig, calculate_quantity, classify_quantity
from recipe_cart.mapping.engine import MappingEngine, map_ingredients, parse_ingredients
from recipe_cart.mapping.matcher import IngredientMatcher
from recipe_cart.mapping.types import CalculationFailure, QuantityEstimate, QuantityKind

__all__ = [
    "CalculationFailure",
    "CalculatorConfig",
    "IngredientMatcher",
    "MappingEngine",
    "QuantityEstimate",
    "QuantityKind",
    "calculate_quantity",
    "classify_quantity",
    "map_ingredients",
    "parse_ingredients",
]
