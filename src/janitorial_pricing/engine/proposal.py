"""Proposal pricing block — the client-facing range built from a breakdown."""

from __future__ import annotations

import math
from typing import Any

from janitorial_pricing.config.settings import PricingConfiguration
from janitorial_pricing.engine.numbers import as_number, round_currency
from janitorial_pricing.models.results import (
    HoursEstimate,
    PriceRange,
    PricingAssumptions,
    PricingBreakdown,
    ProductionRateRange,
    ProposalPricingData,
)

PRICE_RANGE_LOW = 0.9
PRICE_RANGE_HIGH = 1.1
HOURS_RANGE_HIGH = 1.5

DEFAULT_PRODUCTION_RATE_RANGE = ProductionRateRange(min=50, max=100)


def build_proposal_pricing_data(
    breakdown: PricingBreakdown,
    configuration: PricingConfiguration,
    service_type: str,
) -> ProposalPricingData:
    """Quote ±10% around the total and up to 1.5× the labor estimate."""
    low = round_currency(breakdown.total * PRICE_RANGE_LOW)
    high = round_currency(breakdown.total * PRICE_RANGE_HIGH)

    return ProposalPricingData(
        price_range=PriceRange(low=low, high=high),
        hours_estimate=HoursEstimate(
            min=breakdown.labor_hours,
            max=math.ceil(breakdown.labor_hours * HOURS_RANGE_HIGH),
        ),
        assumptions=PricingAssumptions(
            labor_rate=breakdown.labor_rate,
            overhead_percentage=breakdown.overhead_percentage,
            margin_percentage=breakdown.margin_percentage,
            production_rate=production_rate_range(configuration.production_rates.get(service_type)),
        ),
        display_price=round_currency((low + high) / 2),
    )


def production_rate_range(value: Any) -> ProductionRateRange:
    """Read a stored production rate, either a number or a {min, max} mapping."""
    if isinstance(value, dict):
        low = as_number(value.get("min"))
        high = as_number(value.get("max"), low)
        if low or high:
            return ProductionRateRange(min=low, max=max(low, high))
        return DEFAULT_PRODUCTION_RATE_RANGE
    rate = as_number(value)
    if rate > 0:
        return ProductionRateRange(min=rate, max=rate)
    return DEFAULT_PRODUCTION_RATE_RANGE
