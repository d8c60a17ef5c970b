"""Numeric helpers shared by the pricing steps.

Form data and stored settings arrive loosely typed. These helpers turn
whatever is there into a float without raising.
"""

from __future__ import annotations

import logging
import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any, Mapping

logger = logging.getLogger(__name__)

_CENT = Decimal("0.01")


def round_currency(amount: float) -> float:
    """Round half-up to the cent (2.675 → 2.68, 0.125 → 0.13)."""
    if not math.isfinite(amount):
        return amount
    value = Decimal(repr(amount))
    with localcontext() as ctx:
        # quantize needs every integer digit plus the two cents
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        return float(value.quantize(_CENT, rounding=ROUND_HALF_UP))


def as_number(value: Any, default: float = 0.0) -> float:
    """Coerce ``value`` to float; missing or malformed values give ``default``."""
    if value is None:
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(number):
        return default
    return number


def coefficient(mapping: Mapping[str, Any] | None, key: str, default: float) -> float:
    """Look up a rate or multiplier, treating missing, zero and junk as absent."""
    value = mapping.get(key) if isinstance(mapping, Mapping) else None
    number = as_number(value, 0.0)
    if number:
        return number
    logger.debug("No usable coefficient for %r (got %r); using %s", key, value, default)
    return default
