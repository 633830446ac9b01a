"""Providers for recipe-cart."""

from recipe_cart.providers.base import BaseProvider
from recipe_cart.providers.gemini import GeminiProvider

__all__ = ["BaseProvider", "GeminiProvider"]
