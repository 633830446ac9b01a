"""Convert recipe quantities into purchasable product packs."""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from fractions import Fraction

from recipe_cart.mapping.types import (
    CalculationFailure,
    CalculationResult,
    QuantityEstimate,
    QuantityKind,
    RequiredAmount,
)
from recipe_cart.schema import CatalogProduct, Quantity

logger = logging.getLogger(__name__)

VAGUE_NOTE = (
    "Recipe specified 'to taste'. Added minimum quantity (1 pack/unit). "
    "Please adjust if needed."
)
APPROXIMATE_NOTE = "Quantity is approximate based on standard conversions."
MINIMUM_PURCHASE_NOTE = "Minimum purchase quantity."

_NUMBER_PATTERN = re.compile(
    r"^\s*(?P<sign>-)?\s*(?:(?P<whole>\d+)\s+(?=\d+\s*/))?(?P<num>\d+(?:\.\d+)?|\.\d+)(?:\s*/\s*(?P<den>\d+))?"
)


@dataclass(frozen=True)
class SpoonWeightRule:
    """Grams per spoon measure for products carrying any of `tags`."""

    tags: frozenset[str]
    weights_g: tuple[tuple[str, float], ...]

    def weight_for(self, spoon: str) -> float | None:
        return dict(self.weights_g).get(spoon)


DEFAULT_SPOON_WEIGHT_RULES = (
    SpoonWeightRule(frozenset({"butter", "ghee"}), (("tbsp", 15.0),)),
    SpoonWeightRule(frozenset({"sugar"}), (("tbsp", 12.0), ("tsp", 4.0))),
    SpoonWeightRule(frozenset({"salt"}), (("tsp", 6.0),)),
    SpoonWeightRule(frozenset({"spice", "powder", "masala"}), (("tbsp", 7.0), ("tsp", 2.5))),
)

DEFAULT_DIRECT_CONVERSIONS = (
    ("piece", "piece", 1.0),
    ("g", "g", 1.0),
    ("kg", "g", 1000.0),
    ("g", "kg", 0.001),
    ("kg", "kg", 1.0),
    ("ml", "ml", 1.0),
    ("l", "ml", 1000.0),
    ("ml", "l", 0.001),
    ("l", "l", 1.0),
)


@dataclass(frozen=True)
class CalculatorConfig:
    """Conversion tables used by the calculator.

    All tables are tuples; one instance is shared by every request.
    `minimum_purchase_threshold` is the raw pack count below which a result
    is also marked as a minimum purchase.
    """

    vague_markers: tuple[str, ...] = ("to taste",)
    size_descriptors: tuple[str, ...] = ("medium", "large", "small")
    size_weights_g: tuple[tuple[str, float], ...] = (("onion", 120.0), ("tomato", 100.0))
    spoon_weight_rules: tuple[SpoonWeightRule, ...] = DEFAULT_SPOON_WEIGHT_RULES
    default_spoon_weights_g: tuple[tuple[str, float], ...] = (("tbsp", 10.0), ("tsp", 3.0))
    spoon_volumes_ml: tuple[tuple[str, float], ...] = (("tbsp", 15.0), ("tsp", 5.0))
    direct_conversions: tuple[tuple[str, str, float], ...] = DEFAULT_DIRECT_CONVERSIONS
    minimum_purchase_threshold: float = 0.01

    @property
    def spoon_units(self) -> tuple[str, ...]:
        return tuple(unit for unit, _ in self.spoon_volumes_ml)

    def conversion_factor(self, recipe_unit: str, product_unit: str) -> float | None:
        for recipe, product, factor in self.direct_conversions:
            if recipe == recipe_unit and product == product_unit:
                return factor
        return None

    def size_weight_for(self, ingredient_name: str) -> float | None:
        lowered = ingredient_name.lower()
        for keyword, grams in self.size_weights_g:
            if keyword in lowered:
                return grams
        return None

    def spoon_weight_for(self, spoon: str, tags: list[str]) -> float:
        tag_set = set(tags)
        for rule in self.spoon_weight_rules:
            if rule.tags & tag_set:
                grams = rule.weight_for(spoon)
                if grams is not None:
                    return grams
        return dict(self.default_spoon_weights_g)[spoon]

    def spoon_volume_for(self, spoon: str) -> float:
        return dict(self.spoon_volumes_ml)[spoon]


DEFAULT_CONFIG = CalculatorConfig()


def classify_quantity(quantity: Quantity, config: CalculatorConfig = DEFAULT_CONFIG) -> QuantityKind:
    """Pick the strategy for a recipe quantity, in priority order."""

    if any(marker in quantity.value for marker in config.vague_markers):
        return QuantityKind.VAGUE
    unit = quantity.unit.strip().lower()
    if any(descriptor in unit for descriptor in config.size_descriptors):
        return QuantityKind.SIZE_DESCRIPTOR
    if unit in config.spoon_units:
        return QuantityKind.SPOON_MEASURE
    return QuantityKind.STANDARD


def calculate_quantity(
    ingredient_name: str,
    quantity: Quantity,
    product: CatalogProduct,
    config: CalculatorConfig = DEFAULT_CONFIG,
) -> CalculationResult:
    """Compute how many packs of `product` cover the recipe quantity.

    Never raises for a well-formed quantity; every problem is reported as a
    `CalculationFailure` with a readable reason.
    """

    kind = classify_quantity(quantity, config)
    if kind is QuantityKind.VAGUE:
        return QuantityEstimate(quantity=1, notes=VAGUE_NOTE)

    strategy = _STRATEGIES[kind]
    outcome = strategy(ingredient_name, quantity, product, config)
    if isinstance(outcome, CalculationFailure):
        logger.debug("calculation failed for %r: %s", ingredient_name, outcome.reason)
        return outcome
    return finalize_amount(outcome, config)


def finalize_amount(required: RequiredAmount, config: CalculatorConfig = DEFAULT_CONFIG) -> CalculationResult:
    """Round a fractional pack count up to a whole purchase quantity."""

    amount = required.amount
    if not math.isfinite(amount) or amount < 0:
        return CalculationFailure(reason=f"invalid calculated amount {amount!r}")
    if amount == 0:
        return CalculationFailure(reason="calculated amount is zero")

    # Trim float noise such as 7.000000000000001 before taking the ceiling.
    raw = round(amount, 9)

    notes: list[str] = []
    if required.approximate:
        notes.append(APPROXIMATE_NOTE)

    quantity = max(math.ceil(raw), 1)
    if quantity > raw:
        notes.append(f"Rounded up from {raw:.2f}.")
    if amount < config.minimum_purchase_threshold:
        notes.append(MINIMUM_PURCHASE_NOTE)

    return QuantityEstimate(quantity=quantity, notes=" ".join(notes) or None)


def parse_amount(value: str) -> float | None:
    """Parse a recipe amount such as "2", "0.5", "1/2" or "1 1/2".

    Trailing text is ignored ("2 cloves" -> 2.0). Returns None when no number
    is found, the denominator is zero or the value does not fit in a float.
    """

    match = _NUMBER_PATTERN.match(value)
    if not match:
        return None
    denominator = match.group("den")
    try:
        amount = Fraction(match.group("num"))
        if denominator is not None:
            if int(denominator) == 0:
                return None
            amount /= int(denominator)
        if match.group("whole"):
            amount += int(match.group("whole"))
        parsed = float(amount)
    except (OverflowError, ValueError):
        # int() refuses very long digit strings; float() overflows past 1e308.
        return None
    return -parsed if match.group("sign") else parsed


def _positive_amount(quantity: Quantity) -> float | CalculationFailure:
    amount = parse_amount(quantity.value)
    if amount is None:
        return CalculationFailure(reason=f"quantity value '{quantity.value}' is not a number")
    if amount <= 0:
        return CalculationFailure(reason=f"quantity value '{quantity.value}' is not positive")
    return amount


def _size_descriptor_amount(
    ingredient_name: str,
    quantity: Quantity,
    product: CatalogProduct,
    config: CalculatorConfig,
) -> RequiredAmount | CalculationFailure:
    count = _positive_amount(quantity)
    if isinstance(count, CalculationFailure):
        return count

    average_g = config.size_weight_for(ingredient_name)
    if average_g is None:
        return CalculationFailure(reason=f"no size estimate known for '{ingredient_name}'")

    if product.unit == "kg":
        amount = count * average_g / 1000 / product.unit_quantity
    elif product.unit == "g":
        amount = count * average_g / product.unit_quantity
    elif product.unit == "piece":
        amount = count / product.unit_quantity
    else:
        return CalculationFailure(
            reason=f"cannot convert '{quantity.unit}' to product unit '{product.unit}'"
        )
    return RequiredAmount(amount=amount, approximate=True)


def _spoon_measure_amount(
    ingredient_name: str,
    quantity: Quantity,
    product: CatalogProduct,
    config: CalculatorConfig,
) -> RequiredAmount | CalculationFailure:
    count = _positive_amount(quantity)
    if isinstance(count, CalculationFailure):
        return count

    spoon = quantity.unit.strip().lower()
    if product.unit in ("g", "kg"):
        total = count * config.spoon_weight_for(spoon, product.tags)
    elif product.unit in ("ml", "l"):
        total = count * config.spoon_volume_for(spoon)
    else:
        logger.debug("cannot convert spoon unit %r to product unit %r", spoon, product.unit)
        return CalculationFailure(
            reason=f"cannot convert '{spoon}' to product unit '{product.unit}'"
        )

    if product.unit in ("kg", "l"):
        total /= 1000
    return RequiredAmount(amount=total / product.unit_quantity, approximate=True)


def _standard_amount(
    ingredient_name: str,
    quantity: Quantity,
    product: CatalogProduct,
    config: CalculatorConfig,
) -> RequiredAmount | CalculationFailure:
    amount = _positive_amount(quantity)
    if isinstance(amount, CalculationFailure):
        return amount

    recipe_unit = quantity.unit.strip().lower()
    factor = config.conversion_factor(recipe_unit, product.unit)
    if factor is None:
        logger.debug("unit mismatch: recipe %r, product %r", recipe_unit, product.unit)
        return CalculationFailure(
            reason=f"unsupported unit conversion '{recipe_unit}' -> '{product.unit}'"
        )
    return RequiredAmount(amount=amount * factor / product.unit_quantity)


_STRATEGIES = {
    QuantityKind.SIZE_DESCRIPTOR: _size_descriptor_amount,
    QuantityKind.SPOON_MEASURE: _spoon_measure_amount,
    QuantityKind.STANDARD: _standard_amount,
}
