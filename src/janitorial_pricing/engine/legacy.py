"""Simplified calculation paths kept alongside the main engine.

Both use a flat 0.15 $/sq ft rate and ignore service-specific data. Their
formulas differ from ``PricingEngine`` on purpose:

- ``calculate_quick_estimate`` scales by a fixed per-service multiplier and
  adds no overhead or margin.
- ``calculate_detailed_pricing`` estimates labor at 1 hour per 1,000 sq ft and
  includes labor cost in the total.
"""

from __future__ import annotations

from janitorial_pricing.config.settings import PricingConfiguration
from janitorial_pricing.engine.numbers import as_number, coefficient, round_currency
from janitorial_pricing.models.results import DetailedPricingResult

FLAT_RATE_PER_SQFT = 0.15
SQFT_PER_LABOR_HOUR = 1000

DETAILED_DEFAULT_LABOR_RATE = 50.0
DETAILED_DEFAULT_OVERHEAD_PERCENTAGE = 20.0
DETAILED_DEFAULT_MARGIN_PERCENTAGE = 15.0

SERVICE_TYPE_MULTIPLIERS: dict[str, float] = {
    "residential": 1.0,
    "commercial": 1.2,
    "carpet": 1.1,
    "window": 1.3,
    "floor": 1.15,
}


def calculate_quick_estimate(
    service_type: str,
    facility_size: float,
    service_frequency: str,
    configuration: PricingConfiguration,
) -> float:
    """size × 0.15 × frequency multiplier × service multiplier, rounded."""
    frequency_multiplier = coefficient(configuration.frequency_multipliers, service_frequency, 1.0)
    service_multiplier = SERVICE_TYPE_MULTIPLIERS.get(service_type, 1.0)
    return round_currency(facility_size * FLAT_RATE_PER_SQFT * frequency_multiplier * service_multiplier)


def calculate_detailed_pricing(
    service_type: str,
    facility_size: float,
    service_frequency: str,
    configuration: PricingConfiguration,
) -> DetailedPricingResult:
    """Price by square footage with labor included in the total.

    ``service_type`` is accepted for signature parity with the main engine
    but does not change the result.
    """
    labor_rate = as_number(configuration.labor_rate) or DETAILED_DEFAULT_LABOR_RATE
    overhead_percentage = as_number(configuration.overhead_percentage) or DETAILED_DEFAULT_OVERHEAD_PERCENTAGE
    margin_percentage = as_number(configuration.margin_percentage) or DETAILED_DEFAULT_MARGIN_PERCENTAGE

    labor_hours = facility_size / SQFT_PER_LABOR_HOUR
    frequency_multiplier = coefficient(configuration.frequency_multipliers, service_frequency, 1.0)

    base_price = facility_size * FLAT_RATE_PER_SQFT * frequency_multiplier
    labor_cost = labor_hours * labor_rate
    overhead = base_price * (overhead_percentage / 100)
    margin = base_price * (margin_percentage / 100)
    total = base_price + labor_cost + overhead + margin

    return DetailedPricingResult(
        base_price=round_currency(base_price),
        labor_hours=labor_hours,
        labor_cost=round_currency(labor_cost),
        overhead=round_currency(overhead),
        margin=round_currency(margin),
        total=round_currency(total),
        breakdown={
            "base": round_currency(base_price),
            "labor": round_currency(labor_cost),
            "overhead": round_currency(overhead),
            "margin": round_currency(margin),
        },
    )
