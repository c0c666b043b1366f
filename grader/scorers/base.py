"""Base class and shared helpers for the sub-scorers."""
from __future__ import annotations

import math
from abc import ABC, abstractmethod
from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 always going up."""
    return int(math.floor(value + 0.5))


def fmt_number(value: float) -> str:
    """Shortest round-trip rendering of a user-supplied number (45.0 -> '45')."""
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


def to_fixed(value: float, digits: int) -> str:
    """Fixed-point rendering with ties rounded away from zero.

    Works on the exact binary value of *value*, so 1.125 -> '1.13' and
    4.25 -> '4.3' where f-string formatting would round half to even.
    """
    if not math.isfinite(value) or abs(value) >= 1e21:
        return fmt_number(value)
    quantum = Decimal(1).scaleb(-digits)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


class BaseScorer(ABC):
    """Abstract base for the five strategy sub-scorers.

    Scorers hold only class-level thresholds, so a single instance can be
    shared between threads. ``name`` is the dimension label shown in reports.
    """

    name: str = ""

    @abstractmethod
    def evaluate(self, *args, **kwargs):
        ...
