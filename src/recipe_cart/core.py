"""Core recipe processing functions."""

import os

from recipe_cart.catalog.repository import BaseCatalog, CatalogRepository
from recipe_cart.mapping.calculator import CalculatorConfig
from recipe_cart.mapping.engine import MappingEngine
from recipe_cart.providers.base import BaseProvider
from recipe_cart.schema import ProcessedRecipe, RecipeExtraction

MIN_RECIPE_NAME_LENGTH = 3


def _build_gemini_provider(
    api_key: str | None,
    model: str | None = None,
    timeout_sec: float | None = None,
) -> BaseProvider:
    from recipe_cart.providers.gemini import GeminiProvider

    kwargs = {"model": model} if model else {}
    return GeminiProvider(api_key=api_key, timeout_sec=timeout_sec, **kwargs)


def _select_provider(
    provider: str | None,
    api_key: str | None,
    model: str | None = None,
    timeout_sec: float | None = None,
) -> BaseProvider:
    provider_name = (provider or os.getenv("RECIPE_CART_PROVIDER", "gemini")).strip().lower()
    if provider_name in {"gemini", "google"}:
        return _build_gemini_provider(api_key, model=model, timeout_sec=timeout_sec)
    raise ValueError(f"Unsupported provider: {provider_name}")


def _validate_request(recipe_name: str, servings: int) -> str:
    name = (recipe_name or "").strip()
    if len(name) < MIN_RECIPE_NAME_LENGTH:
        raise ValueError("Recipe name seems too short")
    if isinstance(servings, bool) or not isinstance(servings, int) or servings <= 0:
        raise ValueError("Servings must be a positive number")
    return name


def extract_recipe(
    recipe_name: str,
    servings: int,
    *,
    api_key: str | None = None,
    provider: str | None = None,
    model: str | None = None,
    timeout_sec: float | None = None,
) -> RecipeExtraction:
    """Ask the text-generation service for a recipe's ingredients and steps.

    Args:
        recipe_name: Recipe name, at least 3 characters.
        servings: Positive number of servings.
        api_key: Gemini API key. Falls back to GEMINI_API_KEY env var.
        provider: Provider name. Defaults to `RECIPE_CART_PROVIDER` env var,
            then `gemini`.
        model: Optional model override.
        timeout_sec: Deadline for the generation call.

    Returns:
        RecipeExtraction with ingredients and recipe steps.

    Raises:
        ValueError: If the request is invalid or the provider is unknown.
    """
    name = _validate_request(recipe_name, servings)
    engine = _select_provider(provider, api_key, model=model, timeout_sec=timeout_sec)
    return engine.extract(name, servings)


def process_recipe(
    recipe_name: str,
    servings: int,
    *,
    catalog: BaseCatalog | None = None,
    calculator_config: CalculatorConfig | None = None,
    api_key: str | None = None,
    provider: str | None = None,
    model: str | None = None,
    timeout_sec: float | None = None,
) -> ProcessedRecipe:
    """Turn a recipe name into a shopping list against the product catalog.

    Extraction errors propagate unchanged; mapping only starts once the
    generation service returned a valid ingredient list.
    """
    extraction = extract_recipe(
        recipe_name,
        servings,
        api_key=api_key,
        provider=provider,
        model=model,
        timeout_sec=timeout_sec,
    )
    mapping = MappingEngine(
        catalog or CatalogRepository(),
        calculator_config=calculator_config,
    ).map_ingredients(extraction.ingredients)

    return ProcessedRecipe(
        recipe_name=recipe_name.strip(),
        servings=servings,
        matched_items=mapping.matched_items,
        unavailable_items=mapping.unavailable_items,
        recipe_steps=[step for step in extraction.recipe_steps if step.strip()],
    )
