"""Pricing settings — rates, multipliers and loadings supplied per user."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_PRODUCTION_RATES: dict[str, Any] = {
    "residential": 1000,
    "commercial": 800,
    "carpet": 1200,
    "window": 500,
    "floor": 900,
}

DEFAULT_FREQUENCY_MULTIPLIERS: dict[str, float] = {
    "one-time": 1.0,
    "1x-month": 1.0,
    "bi-weekly": 1.1,
    "weekly": 1.2,
    "2x-week": 1.3,
    "3x-week": 1.4,
    "5x-week": 1.5,
    "daily": 1.6,
}

DEFAULT_SERVICE_TYPE_RATES: dict[str, float] = {
    "residential": 0.15,
    "commercial": 0.20,
    "carpet": 0.12,
    "window": 0.25,
    "floor": 0.18,
}


class PricingConfiguration(BaseModel):
    """Coefficients consumed by the pricing engine.

    Mapping fields may be sparse: the engine falls back to a default
    coefficient for every key it cannot find.
    """

    model_config = ConfigDict(frozen=True)

    labor_rate: float = Field(default=35.0, gt=0, allow_inf_nan=False, description="Labor cost per hour ($/h)")
    overhead_percentage: float = Field(
        default=15.0, allow_inf_nan=False,
        description="Business overhead loading on the subtotal (%). 0–100 by convention.",
    )
    margin_percentage: float = Field(
        default=25.0, allow_inf_nan=False,
        description="Profit margin loading on the subtotal (%). 0–100 by convention.",
    )
    production_rates: dict[str, Any] = Field(
        default_factory=lambda: dict(DEFAULT_PRODUCTION_RATES),
        description="Units cleaned per hour by service type. Either a number or a "
                    "{'min': x, 'max': y} range per key. Stored for proposals, not "
                    "used by the price arithmetic.",
    )
    frequency_multipliers: dict[str, float] = Field(
        default_factory=lambda: dict(DEFAULT_FREQUENCY_MULTIPLIERS),
        description="Multiplier per service frequency key (e.g. 'weekly': 1.2). "
                    "Unknown frequencies price at 1.0.",
    )
    service_type_rates: dict[str, float] = Field(
        default_factory=lambda: dict(DEFAULT_SERVICE_TYPE_RATES),
        description="Base rate per unit by service type: $/sq ft, or $/window for "
                    "'window'. Missing types price at 0.15.",
    )

    def with_updates(self, **changes: Any) -> PricingConfiguration:
        """Return a validated copy with ``changes`` replacing whole fields."""
        data = self.model_dump()
        data.update(changes)
        return PricingConfiguration(**data)


DEFAULT_PRICING_CONFIGURATION = PricingConfiguration()
