"""Custom exceptions for recipe-cart."""


class RecipeCartError(Exception):
    """Base exception for recipe-cart."""

    pass


class AuthenticationError(RecipeCartError):
    """Raised when API key is invalid or missing."""

    pass


class RateLimitError(RecipeCartError):
    """Raised when API rate limit is exceeded."""

    pass


class GenerationError(RecipeCartError):
    """Raised when the text-generation service fails or returns unusable output."""

    pass


class IngredientContractError(RecipeCartError):
    """Raised when an ingredient payload does not match the expected shape."""

    pass


class CatalogError(RecipeCartError):
    """Raised when catalog data cannot be loaded."""

    pass
