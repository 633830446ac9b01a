"""Grocery catalog v1."""

from recipe_cart.catalog.data.v1.products import PRODUCTS

__all__ = ["PRODUCTS"]
