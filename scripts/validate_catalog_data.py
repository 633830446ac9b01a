"""Validate packaged catalog data consistency.

Checks:
1. Every product has a supported unit and a positive unit quantity.
2. Product ids are unique and tags are lowercase and trimmed.
3. Names or tags shared by several products are reported (only the first is matched).
4. Python sources and optional JSON mirrors are identical.
"""

from __future__ import annotations

import json
import runpy
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
DATA_ROOT = ROOT / "src" / "recipe_cart" / "catalog" / "data"
SUPPORTED_UNITS = {"g", "kg", "ml", "l", "piece", "pack"}


def fail(message: str) -> None:
    print(f"[catalog-check] ERROR: {message}")
    raise SystemExit(1)


def warn(message: str) -> None:
    print(f"[catalog-check] WARN: {message}")


def load_python_constant(path: Path, key: str) -> list[dict]:
    namespace = runpy.run_path(str(path))
    if key not in namespace or not isinstance(namespace[key], list):
        fail(f"Missing or invalid constant '{key}' in {path}")
    return namespace[key]


def validate_products(products: list[dict], label: str) -> None:
    seen_ids: set[str] = set()
    for product in products:
        product_id = product.get("id")
        if not isinstance(product_id, str) or not product_id:
            fail(f"{label}: product without id: {product}")
        if product_id in seen_ids:
            fail(f"{label}: duplicate product id: {product_id}")
        seen_ids.add(product_id)

        if product.get("unit") not in SUPPORTED_UNITS:
            fail(f"{label}: unsupported unit for {product_id}: {product.get('unit')!r}")
        unit_quantity = product.get("unitQuantity")
        if not isinstance(unit_quantity, (int, float)) or unit_quantity <= 0:
            fail(f"{label}: unitQuantity must be positive for {product_id}")

        for tag in product.get("tags", []):
            if tag != tag.strip().lower():
                fail(f"{label}: tag {tag!r} of {product_id} is not lowercase/trimmed")


def validate_shadowing(products: list[dict], label: str) -> None:
    names: dict[str, str] = {}
    tags: dict[str, str] = {}
    for product in products:
        name = product["name"].lower()
        if name in names:
            warn(f"{label}: name {name!r} shadowed: {names[name]} wins over {product['id']}")
        names.setdefault(name, product["id"])
        for tag in product.get("tags", []):
            if tag in tags:
                warn(f"{label}: tag {tag!r} shadowed: {tags[tag]} wins over {product['id']}")
            tags.setdefault(tag, product["id"])


def iter_catalog_versions() -> list[Path]:
    versions = [path for path in sorted(DATA_ROOT.iterdir()) if (path / "products.py").exists()]
    if not versions:
        fail(f"No catalog versions found under {DATA_ROOT}")
    return versions


def main() -> int:
    for version_dir in iter_catalog_versions():
        label = version_dir.name
        products = load_python_constant(version_dir / "products.py", "PRODUCTS")
        validate_products(products, label)
        validate_shadowing(products, label)

        json_path = version_dir / "products.json"
        if json_path.exists() and json.loads(json_path.read_text(encoding="utf-8")) != products:
            fail(f"{label}/products.py and {label}/products.json are out of sync.")

    print("[catalog-check] OK")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
