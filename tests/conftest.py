import pytest

from recipe_cart.catalog import CatalogRepository
from recipe_cart.schema import CatalogProduct


def make_product(name: str, unit: str, unit_quantity: float, tags: list[str] | None = None) -> CatalogProduct:
    return CatalogProduct(
        id=name.lower().replace(" ", "-"),
        name=name,
        unit=unit,
        unit_quantity=unit_quantity,
        tags=tags or [],
        price=10,
    )


@pytest.fixture
def product_factory():
    return make_product


@pytest.fixture
def grocery_catalog() -> CatalogRepository:
    return CatalogRepository(
        version="test",
        products=[
            make_product("Onion", "kg", 1, ["vegetable", "onion"]),
            make_product("Tomato", "kg", 1, ["vegetable", "tomato"]),
            make_product("Tata Salt Iodized", "kg", 1, ["salt", "iodized salt"]),
            make_product("Amul Butter", "g", 100, ["butter", "dairy"]),
            make_product("Black Pepper", "g", 50, ["pepper", "spice"]),
            make_product("Sunflower Oil", "l", 1, ["oil", "cooking oil"]),
            make_product("Farm Eggs", "piece", 12, ["egg"]),
        ],
    )
