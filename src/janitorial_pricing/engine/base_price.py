"""Base price — units × rate, before complexity and frequency."""

from __future__ import annotations

from typing import Any, NamedTuple

from janitorial_pricing.engine.numbers import as_number


class BasePrice(NamedTuple):
    base_price: float
    units: float
    unit_type: str


def window_count(service_data: dict[str, Any]) -> float:
    """Windows to clean; a missing or non-positive count is treated as one window."""
    count = as_number(service_data.get("window_count"))
    return count if count > 0 else 1.0


def compute_base_price(
    service_type: str,
    facility_size: float,
    service_data: dict[str, Any],
    base_rate: float,
) -> BasePrice:
    """Price the raw job size.

    Window services count windows; every other service counts square feet.
    """
    if service_type == "window":
        units = window_count(service_data)
        return BasePrice(base_price=units * base_rate, units=units, unit_type="windows")

    return BasePrice(base_price=facility_size * base_rate, units=facility_size, unit_type="square feet")
