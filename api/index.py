from dataclasses import dataclass
from functools import lru_cache
import logging
import os

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from recipe_cart import process_recipe
from recipe_cart.catalog import BaseCatalog, CatalogRepository
from recipe_cart.exceptions import (
    AuthenticationError,
    CatalogError,
    GenerationError,
    IngredientContractError,
    RateLimitError,
)
from recipe_cart.mapping import MappingEngine, parse_ingredients
from recipe_cart.schema import MappingResult, ProcessedRecipe

logger = logging.getLogger(__name__)


def _safe_float(value: str | None, default: float) -> float:
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class ServiceConfig:
    provider: str = "gemini"
    api_key: str | None = None
    model: str | None = None
    generation_timeout_sec: float = 30.0
    catalog_version: str = "v1"
    catalog_path: str | None = None
    frontend_origins: tuple[str, ...] = ("*",)

    @classmethod
    def from_env(cls) -> "ServiceConfig":
        raw_origins = os.getenv("FRONTEND_ORIGINS", "*")
        return cls(
            provider=os.getenv("RECIPE_CART_PROVIDER", "gemini").strip().lower() or "gemini",
            api_key=os.getenv("GEMINI_API_KEY"),
            model=os.getenv("RECIPE_CART_MODEL"),
            generation_timeout_sec=_safe_float(os.getenv("RECIPE_CART_GENERATION_TIMEOUT_SEC"), 30.0),
            catalog_version=os.getenv("CATALOG_VERSION", "v1"),
            catalog_path=os.getenv("CATALOG_PATH"),
            frontend_origins=tuple(origin.strip() for origin in raw_origins.split(",") if origin.strip()),
        )


CONFIG = ServiceConfig.from_env()

app = FastAPI(title="recipe-cart API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(CONFIG.frontend_origins),
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


class RecipeRequest(BaseModel):
    recipeName: str
    servings: int


@lru_cache(maxsize=4)
def _load_catalog(version: str, path: str | None) -> BaseCatalog:
    if path:
        return CatalogRepository.from_json(path)
    return CatalogRepository(version=version)


def get_catalog() -> BaseCatalog:
    try:
        return _load_catalog(CONFIG.catalog_version, CONFIG.catalog_path)
    except CatalogError as exc:
        logger.exception("catalog load failed")
        raise HTTPException(status_code=500, detail="catalog_unavailable") from exc


@app.get("/health")
def health() -> dict[str, bool]:
    return {"ok": True}


@app.post("/recipes/process", response_model=ProcessedRecipe)
def process_recipe_endpoint(body: RecipeRequest) -> ProcessedRecipe:
    catalog = get_catalog()
    try:
        return process_recipe(
            body.recipeName,
            body.servings,
            catalog=catalog,
            api_key=CONFIG.api_key,
            provider=CONFIG.provider,
            model=CONFIG.model,
            timeout_sec=CONFIG.generation_timeout_sec,
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except AuthenticationError as exc:
        raise HTTPException(status_code=401, detail=str(exc)) from exc
    except RateLimitError as exc:
        raise HTTPException(status_code=429, detail=str(exc)) from exc
    except GenerationError as exc:
        logger.warning("recipe generation failed: %s", exc)
        raise HTTPException(status_code=502, detail="Error communicating with the AI service.") from exc
    except Exception as exc:
        logger.exception("recipe processing failed")
        raise HTTPException(status_code=500, detail="internal_error") from exc


@app.post("/ingredients/map", response_model=MappingResult)
async def map_ingredients_endpoint(request: Request) -> MappingResult:
    try:
        body = await request.json()
    except ValueError as exc:
        raise HTTPException(status_code=400, detail="invalid JSON body") from exc

    payload = body.get("ingredients") if isinstance(body, dict) else None
    try:
        ingredients = parse_ingredients(payload)
    except IngredientContractError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    return MappingEngine(get_catalog()).map_ingredients(ingredients)
