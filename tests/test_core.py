"""Tests for core recipe processing."""

import pytest

from recipe_cart import ParsedIngredient, Quantity, RecipeExtraction, extract_recipe, process_recipe
from recipe_cart.exceptions import AuthenticationError, GenerationError
from recipe_cart.mapping.engine import MappingEngine


def _extraction() -> RecipeExtraction:
    return RecipeExtraction(
        ingredients=[
            ParsedIngredient(name="Onions", quantity=Quantity(value="2", unit="medium")),
            ParsedIngredient(name="Butter", quantity=Quantity(value="2", unit="tbsp")),
            ParsedIngredient(name="Kasuri Methi", quantity=Quantity(value="1", unit="tsp")),
        ],
        recipe_steps=["Chop the onions.", " ", "Melt the butter."],
    )


def test_extract_requires_api_key(monkeypatch):
    """extract_recipe() should raise AuthenticationError without API key."""
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)

    with pytest.raises(AuthenticationError):
        extract_recipe("Paneer Butter Masala", 2, provider="gemini")


def test_extract_with_mock_gemini_provider(mocker):
    mock_provider = mocker.MagicMock()
    mock_provider.extract.return_value = _extraction()

    mocker.patch("recipe_cart.core._build_gemini_provider", return_value=mock_provider)

    result = extract_recipe("  Paneer Butter Masala ", 4, api_key="test-key", provider="gemini")

    assert result.ingredients[0].name == "Onions"
    mock_provider.extract.assert_called_once_with("Paneer Butter Masala", 4)


def test_process_recipe_maps_ingredients(mocker, grocery_catalog):
    mock_provider = mocker.MagicMock()
    mock_provider.extract.return_value = _extraction()
    mocker.patch("recipe_cart.core._build_gemini_provider", return_value=mock_provider)

    result = process_recipe("Paneer Butter Masala", 2, catalog=grocery_catalog, api_key="test-key")

    assert result.recipe_name == "Paneer Butter Masala"
    assert result.servings == 2
    assert [item.matched_product.name for item in result.matched_items] == ["Onion", "Amul Butter"]
    assert result.unavailable_items[0].original_ingredient_name == "Kasuri Methi"
    assert result.recipe_steps == ["Chop the onions.", "Melt the butter."]


def test_generation_failure_stops_before_mapping(mocker, grocery_catalog):
    mock_provider = mocker.MagicMock()
    mock_provider.extract.side_effect = GenerationError("Gemini API Error: deadline exceeded")
    mocker.patch("recipe_cart.core._build_gemini_provider", return_value=mock_provider)
    map_spy = mocker.spy(MappingEngine, "map_ingredients")

    with pytest.raises(GenerationError):
        process_recipe("Paneer Butter Masala", 2, catalog=grocery_catalog)

    map_spy.assert_not_called()


def test_provider_receives_timeout(mocker):
    build = mocker.patch("recipe_cart.core._build_gemini_provider")
    build.return_value.extract.return_value = _extraction()

    extract_recipe("Dal Tadka", 2, api_key="k", provider="gemini", timeout_sec=5.0)

    build.assert_called_once_with("k", model=None, timeout_sec=5.0)


@pytest.mark.parametrize(
    ("recipe_name", "servings"),
    [("ab", 2), ("   ", 2), ("Dal Tadka", 0), ("Dal Tadka", -1), ("Dal Tadka", True)],
)
def test_invalid_request_raises(mocker, recipe_name, servings):
    build = mocker.patch("recipe_cart.core._build_gemini_provider")

    with pytest.raises(ValueError):
        extract_recipe(recipe_name, servings)

    build.assert_not_called()


def test_unsupported_provider_raises():
    with pytest.raises(ValueError):
        extract_recipe("Dal Tadka", 2, provider="unknown")


def test_provider_from_env(monkeypatch):
    monkeypatch.setenv("RECIPE_CART_PROVIDER", "unknown")

    with pytest.raises(ValueError, match="Unsupported provider: unknown"):
        extract_recipe("Dal Tadka", 2)
