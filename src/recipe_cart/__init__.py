"""recipe-cart: Turn recipes into grocery shopping lists."""

from recipe_cart.catalog import BaseCatalog, CatalogRepository
from recipe_cart.core import extract_recipe, process_recipe
from recipe_cart.mapping import MappingEngine, map_ingredients
from recipe_cart.schema import (
    CatalogProduct,
    MappedItem,
    MappingResult,
    ParsedIngredient,
    ProcessedRecipe,
    Quantity,
    RecipeExtraction,
    UnavailableItem,
)

__version__ = "0.1.0"

__all__ = [
    "extract_recipe",
    "process_recipe",
    "map_ingredients",
    "BaseCatalog",
    "CatalogProduct",
    "CatalogRepository",
    "MappedItem",
    "MappingEngine",
    "MappingResult",
    "ParsedIngredient",
    "ProcessedRecipe",
    "Quantity",
    "RecipeExtraction",
    "UnavailableItem",
    "__version__",
]
