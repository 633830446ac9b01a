"""Base provider interface."""

from abc import ABC, abstractmethod

from recipe_cart.schema import RecipeExtraction


class BaseProvider(ABC):
    """Abstract base class for text-generation providers."""

    @abstractmethod
    def extract(self, recipe_name: str, servings: int) -> RecipeExtraction:
        """Extract ingredients and steps for a recipe.

        Args:
            recipe_name: Free-text recipe name, e.g. "Paneer Butter Masala".
            servings: Number of servings to scale the ingredients for.

        Returns:
            RecipeExtraction with parsed ingredients and cooking steps
        """
        pass
