"""Gemini provider implementation."""

import logging
import os

from google import genai
from google.genai import errors, types
from pydantic import ValidationError

from recipe_cart.exceptions import AuthenticationError, GenerationError, RateLimitError
from recipe_cart.providers.base import BaseProvider
from recipe_cart.schema import RecipeExtraction

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SEC = 30.0

EXTRACTION_PROMPT = """Analyze the recipe "{recipe_name}" for {servings} servings.

Your tasks are:
1. Extract the list of ingredients and their required quantities. Use standard metric units (g, ml, kg, l) or common units (piece, tsp, tbsp, pinch, dash) where appropriate. Represent all quantity values as strings (e.g., "200", "1", "0.5", "to taste").
2. Provide clear, concise, step-by-step cooking instructions for the recipe.

Return a JSON object with these fields:

{{
  "ingredients": [
    {{"name": "Name of the ingredient, e.g. Red Onion", "quantity": {{"value": "200", "unit": "g"}}}}
  ],
  "recipeSteps": ["Step 1: Do something.", "Step 2: Do something else."]
}}

Important:
- Use one entry per ingredient
- Quantity value and unit must always be strings
- Return valid JSON only, no additional text"""


def build_prompt(recipe_name: str, servings: int) -> str:
    return EXTRACTION_PROMPT.format(recipe_name=recipe_name, servings=servings)


def _resolve_timeout(timeout_sec: float | None) -> float:
    if timeout_sec is not None:
        return timeout_sec
    raw = os.environ.get("RECIPE_CART_GENERATION_TIMEOUT_SEC")
    try:
        return float(raw) if raw else DEFAULT_TIMEOUT_SEC
    except ValueError:
        return DEFAULT_TIMEOUT_SEC


class GeminiProvider(BaseProvider):
    """Gemini text generation provider."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str = "gemini-2.0-flash",
        timeout_sec: float | None = None,
    ):
        """Initialize Gemini provider.

        Args:
            api_key: Gemini API key. Falls back to GEMINI_API_KEY env var.
            model: Model name to use.
            timeout_sec: Request deadline. Falls back to
                RECIPE_CART_GENERATION_TIMEOUT_SEC env var, then 30 seconds.

        Raises:
            AuthenticationError: If no API key is provided or found.
        """
        self.api_key = api_key or os.environ.get("GEMINI_API_KEY")
        if not self.api_key:
            raise AuthenticationError(
                "No API key provided. Set GEMINI_API_KEY environment variable "
                "or pass api_key parameter."
            )
        self.model = model
        self.timeout_sec = _resolve_timeout(timeout_sec)
        self.client = genai.Client(
            api_key=self.api_key,
            http_options=types.HttpOptions(timeout=int(self.timeout_sec * 1000)),
        )

    def extract(self, recipe_name: str, servings: int) -> RecipeExtraction:
        """Extract ingredients and steps using Gemini JSON mode.

        Raises:
            RateLimitError: If API rate limit is exceeded
            AuthenticationError: If API key is invalid
            GenerationError: If the call fails, times out, is blocked or
                returns output that does not match RecipeExtraction
        """
        try:
            response = self.client.models.generate_content(
                model=self.model,
                contents=build_prompt(recipe_name, servings),
                config=types.GenerateContentConfig(
                    candidate_count=1,
                    temperature=0.3,
                    max_output_tokens=4096,
                    response_mime_type="application/json",
                    response_schema=RecipeExtraction,
                ),
            )
        except errors.ClientError as e:
            if "rate" in str(e).lower() or "quota" in str(e).lower():
                raise RateLimitError(f"API rate limit exceeded: {e}") from e
            if "auth" in str(e).lower() or "key" in str(e).lower():
                raise AuthenticationError(f"Invalid API key: {e}") from e
            raise GenerationError(f"Gemini API Error: {e}") from e
        except Exception as e:
            raise GenerationError(f"Gemini API Error: {e}") from e

        feedback = getattr(response, "prompt_feedback", None)
        block_reason = getattr(feedback, "block_reason", None) if feedback else None
        if block_reason:
            raise GenerationError(f"Gemini prompt blocked: {block_reason}")

        candidates = getattr(response, "candidates", None) or []
        if candidates:
            logger.debug("gemini finish reason: %s", getattr(candidates[0], "finish_reason", None))

        text = response.text
        if not text:
            raise GenerationError("Gemini API call failed: Empty JSON response text.")

        try:
            return RecipeExtraction.model_validate_json(text)
        except ValidationError as e:
            raise GenerationError(f"Failed to parse JSON response from AI: {e}") from e
