"""Resolve free-text ingredient names to catalog products."""

from __future__ import annotations

from recipe_cart.catalog.repository import BaseCatalog
from recipe_cart.schema import CatalogProduct


def normalize_name(name: str) -> str:
    return name.strip().lower()


def singularize(normalized_name: str) -> str:
    """Strip a plural suffix: "es" first, then "s".

    Deliberately naive: "tomatoes" -> "tomato", but "leaves" -> "leav".
    """

    if normalized_name.endswith("es"):
        return normalized_name[:-2]
    if normalized_name.endswith("s"):
        return normalized_name[:-1]
    return normalized_name


class IngredientMatcher:
    """Exact, case-insensitive name-then-tag lookup with a plural fallback."""

    def __init__(self, catalog: BaseCatalog):
        self.catalog = catalog

    def find_product(self, ingredient_name: str) -> CatalogProduct | None:
        normalized = normalize_name(ingredient_name)
        singular = singularize(normalized)

        candidates = [singular]
        if singular != normalized:
            candidates.append(normalized)

        for candidate in candidates:
            if not candidate:
                continue
            product = self.catalog.find_by_name(candidate) or self.catalog.find_by_tag(candidate)
            if product:
                return product
        return None
