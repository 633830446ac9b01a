import json
import logging

import pytest
from google.genai import errors

from recipe_cart.exceptions import AuthenticationError, GenerationError, RateLimitError
from recipe_cart.providers.gemini import GeminiProvider, build_prompt

RESPONSE = {
    "ingredients": [
        {"name": "Paneer", "quantity": {"value": "200", "unit": "g"}},
        {"name": "Salt", "quantity": {"value": "to taste", "unit": "pinch"}},
    ],
    "recipeSteps": ["Cube the paneer.", "Simmer in gravy."],
}


@pytest.fixture
def client(mocker):
    client_cls = mocker.patch("recipe_cart.providers.gemini.genai.Client")
    return client_cls


def _response(mocker, text, block_reason=None):
    response = mocker.MagicMock()
    response.text = text
    response.prompt_feedback = mocker.MagicMock(block_reason=block_reason) if block_reason else None
    response.candidates = [mocker.MagicMock(finish_reason="STOP")]
    return response


def test_requires_api_key(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)

    with pytest.raises(AuthenticationError):
        GeminiProvider()


def test_extract_parses_structured_response(mocker, client, caplog):
    client.return_value.models.generate_content.return_value = _response(mocker, json.dumps(RESPONSE))

    provider = GeminiProvider(api_key="test-key")
    with caplog.at_level(logging.DEBUG, logger="recipe_cart.providers.gemini"):
        result = provider.extract("Paneer Butter Masala", 2)

    assert [item.name for item in result.ingredients] == ["Paneer", "Salt"]
    assert result.ingredients[1].quantity.value == "to taste"
    assert result.recipe_steps == ["Cube the paneer.", "Simmer in gravy."]
    assert "gemini finish reason: STOP" in caplog.text

    kwargs = client.return_value.models.generate_content.call_args.kwargs
    assert "Paneer Butter Masala" in kwargs["contents"]
    assert kwargs["config"].response_mime_type == "application/json"
    assert kwargs["config"].temperature == 0.3


def test_timeout_is_passed_to_client(client):
    GeminiProvider(api_key="test-key", timeout_sec=5)

    http_options = client.call_args.kwargs["http_options"]
    assert http_options.timeout == 5000


def test_timeout_from_env(monkeypatch, client):
    monkeypatch.setenv("RECIPE_CART_GENERATION_TIMEOUT_SEC", "12.5")

    provider = GeminiProvider(api_key="test-key")

    assert provider.timeout_sec == 12.5


def test_invalid_timeout_env_uses_default(monkeypatch, client):
    monkeypatch.setenv("RECIPE_CART_GENERATION_TIMEOUT_SEC", "soon")

    assert GeminiProvider(api_key="test-key").timeout_sec == 30.0


def test_blocked_prompt_raises(mocker, client):
    client.return_value.models.generate_content.return_value = _response(
        mocker, json.dumps(RESPONSE), block_reason="SAFETY"
    )

    with pytest.raises(GenerationError, match="blocked"):
        GeminiProvider(api_key="test-key").extract("Paneer Butter Masala", 2)


@pytest.mark.parametrize("text", ["", None])
def test_empty_response_raises(mocker, client, text):
    client.return_value.models.generate_content.return_value = _response(mocker, text)

    with pytest.raises(GenerationError, match="Empty"):
        GeminiProvider(api_key="test-key").extract("Paneer Butter Masala", 2)


@pytest.mark.parametrize(
    "text",
    [
        "not json",
        json.dumps({"recipeSteps": []}),
        json.dumps({"ingredients": [{"name": "Salt", "quantity": {"value": 1, "unit": "tsp"}}]}),
    ],
)
def test_malformed_response_raises(mocker, client, text):
    client.return_value.models.generate_content.return_value = _response(mocker, text)

    with pytest.raises(GenerationError):
        GeminiProvider(api_key="test-key").extract("Paneer Butter Masala", 2)


def test_transport_error_raises_generation_error(client):
    client.return_value.models.generate_content.side_effect = TimeoutError("deadline exceeded")

    with pytest.raises(GenerationError, match="deadline exceeded"):
        GeminiProvider(api_key="test-key").extract("Paneer Butter Masala", 2)


def test_quota_error_raises_rate_limit(client):
    error = errors.ClientError(
        429,
        {"error": {"code": 429, "message": "Quota exceeded", "status": "RESOURCE_EXHAUSTED"}},
    )
    client.return_value.models.generate_content.side_effect = error

    with pytest.raises(RateLimitError):
        GeminiProvider(api_key="test-key").extract("Paneer Butter Masala", 2)


def test_build_prompt_mentions_servings():
    prompt = build_prompt("Dal Tadka", 3)

    assert '"Dal Tadka" for 3 servings' in prompt
    assert '"recipeSteps"' in prompt
