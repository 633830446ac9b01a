"""Product catalog for recipe-cart."""

from recipe_cart.catalog.repository import BaseCatalog, CatalogRepository

__all__ = ["BaseCatalog", "CatalogRepository"]
