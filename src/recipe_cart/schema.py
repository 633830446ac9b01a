"""Data models for recipe-cart."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator
from pydantic.alias_generators import to_camel

ProductUnit = Literal["g", "kg", "ml", "l", "piece", "pack"]


class _WireModel(BaseModel):
    """Base model serialized with the camelCase field names of the JSON contract."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Quantity(_WireModel):
    """Quantity as emitted by the extraction step."""

    value: StrictStr
    unit: StrictStr = Field(min_length=1)


class ParsedIngredient(_WireModel):
    """A single ingredient extracted from a recipe."""

    name: StrictStr = Field(min_length=1)
    quantity: Quantity

    @property
    def display_quantity(self) -> str:
        return f"{self.quantity.value} {self.quantity.unit}"


class CatalogProduct(_WireModel):
    """Purchasable product in the grocery catalog."""

    id: str
    name: str
    tags: list[str] = Field(default_factory=list)
    unit: ProductUnit
    unit_quantity: float = Field(gt=0)
    price: float = Field(default=0.0, ge=0)
    category: str | None = None
    brand: str | None = None
    description: str | None = None
    image_url: str | None = None

    @field_validator("tags")
    @classmethod
    def _lowercase_tags(cls, tags: list[str]) -> list[str]:
        return [tag.strip().lower() for tag in tags if tag.strip()]

    @property
    def pack_size(self) -> str:
        return f"{self.unit_quantity:g} {self.unit}"


class MappedItem(_WireModel):
    """Ingredient resolved to a product and a purchase quantity."""

    original_ingredient_name: str
    original_quantity: str
    matched_product: CatalogProduct
    calculated_quantity_needed: int = Field(ge=1)
    calculation_notes: str | None = None


class UnavailableItem(_WireModel):
    """Ingredient that could not be resolved."""

    original_ingredient_name: str
    original_quantity: str
    reason: str


class MappingResult(_WireModel):
    """Outcome of mapping a list of ingredients to catalog products."""

    matched_items: list[MappedItem] = Field(default_factory=list)
    unavailable_items: list[UnavailableItem] = Field(default_factory=list)


class RecipeExtraction(_WireModel):
    """Structured output expected from the text-generation service."""

    ingredients: list[ParsedIngredient]
    recipe_steps: list[str] = Field(default_factory=list)


class ProcessedRecipe(_WireModel):
    """Shopping list and instructions produced for a recipe request."""

    recipe_name: str
    servings: int
    matched_items: list[MappedItem] = Field(default_factory=list)
    unavailable_items: list[UnavailableItem] = Field(default_factory=list)
    recipe_steps: list[str] = Field(default_factory=list)
