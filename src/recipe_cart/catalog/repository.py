"""Read-only product catalog lookups."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from importlib import import_module
from importlib.resources import files
from pathlib import Path

from pydantic import ValidationError

from recipe_cart.exceptions import CatalogError
from recipe_cart.schema import CatalogProduct


class BaseCatalog(ABC):
    """Lookup operations the ingredient matcher depends on."""

    @abstractmethod
    def find_by_name(self, name: str) -> CatalogProduct | None:
        """Return the product whose name equals `name`, ignoring case."""
        pass

    @abstractmethod
    def find_by_tag(self, tag: str) -> CatalogProduct | None:
        """Return a product carrying `tag`, ignoring case."""
        pass


class CatalogRepository(BaseCatalog):
    """In-memory catalog loaded from packaged product data.

    When several products share a name or tag, the first one in catalog
    order is returned.
    """

    def __init__(self, version: str = "v1", products: list[CatalogProduct] | None = None):
        self.version = version
        self.products: list[CatalogProduct] = products if products is not None else self._load_products()
        self._by_name: dict[str, CatalogProduct] = {}
        self._by_tag: dict[str, CatalogProduct] = {}
        for product in self.products:
            self._by_name.setdefault(product.name.lower(), product)
            for tag in product.tags:
                self._by_tag.setdefault(tag, product)

    @classmethod
    def from_json(cls, path: str | Path) -> "CatalogRepository":
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise CatalogError(f"Failed to read catalog file {path}: {exc}") from exc
        return cls(version=path.stem, products=_parse_products(data))

    def find_by_name(self, name: str) -> CatalogProduct | None:
        return self._by_name.get(name.lower())

    def find_by_tag(self, tag: str) -> CatalogProduct | None:
        return self._by_tag.get(tag.lower())

    def _load_products(self) -> list[CatalogProduct]:
        try:
            module = import_module(f"recipe_cart.catalog.data.{self.version}.products")
            data = module.PRODUCTS
        except ModuleNotFoundError:
            path = files("recipe_cart.catalog.data").joinpath(self.version, "products.json")
            try:
                data = json.loads(path.read_text(encoding="utf-8"))
            except (OSError, ValueError) as exc:
                raise CatalogError(f"Catalog version not found: {self.version}") from exc
        return _parse_products(data)


def _parse_products(data: object) -> list[CatalogProduct]:
    if not isinstance(data, list):
        raise CatalogError("Catalog data must be a list of products")
    try:
        return [CatalogProduct.model_validate(item) for item in data]
    except ValidationError as exc:
        raise CatalogError(f"Invalid catalog product: {exc}") from exc
