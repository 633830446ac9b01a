"""Result types for quantity calculation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class QuantityKind(str, Enum):
    """Strategy used to interpret a recipe quantity."""

    VAGUE = "vague"
    SIZE_DESCRIPTOR = "size_descriptor"
    SPOON_MEASURE = "spoon_measure"
    STANDARD = "standard"


@dataclass(frozen=True)
class RequiredAmount:
    """Fractional number of product packs needed, before rounding."""

    amount: float
    approximate: bool = False


@dataclass(frozen=True)
class QuantityEstimate:
    quantity: int
    notes: str | None = None


@dataclass(frozen=True)
class CalculationFailure:
    reason: str


CalculationResult = QuantityEstimate | CalculationFailure
