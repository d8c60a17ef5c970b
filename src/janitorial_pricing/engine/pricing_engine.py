"""Pricing engine — turns a service request into a price breakdown.

Pipeline for ``calculate_pricing``:

1. Base price        units × base rate (sq ft, or windows for window cleaning)
2. Complexity        base price × complexity factor (≥ 1.0)
3. Frequency         × frequency multiplier (unknown frequency → 1.0)
4. Service fees      named flat / per-window / %-of-base adjustments
5. Subtotal          frequency-adjusted price + fees
6. Labor             independent hours estimate × labor rate
7. Overhead, margin  percentages of the subtotal
8. Total             subtotal + overhead + margin

Labor cost is reported but not added to the total: the client price is built
from the subtotal, and labor is a scheduling estimate.

The engine holds no state beyond its configuration and never raises while
calculating. Missing settings keys and missing service attributes fall back
to defaults.
"""

from __future__ import annotations

import logging
from typing import Any

from janitorial_pricing.config.request import PricingRequest
from janitorial_pricing.config.settings import PricingConfiguration
from janitorial_pricing.engine.adjustments import compute_service_adjustments
from janitorial_pricing.engine.base_price import compute_base_price
from janitorial_pricing.engine.complexity import compute_complexity_factor
from janitorial_pricing.engine.labor import compute_labor_hours
from janitorial_pricing.engine.numbers import coefficient, round_currency
from janitorial_pricing.exceptions import ConfigurationRequiredError
from janitorial_pricing.models.results import CalculationDetails, PricingBreakdown

logger = logging.getLogger(__name__)

FALLBACK_BASE_RATE = 0.15
FALLBACK_FREQUENCY_MULTIPLIER = 1.0

# Quick estimates treat service rates as relative multipliers
QUICK_ESTIMATE_SERVICE_RATES: dict[str, float] = {
    "residential": 1.0,
    "commercial": 1.2,
    "carpet": 1.1,
    "window": 1.3,
    "floor": 1.15,
}

QUICK_ESTIMATE_FREQUENCY_MULTIPLIERS: dict[str, float] = {
    "one-time": 1.0,
    "1x-month": 1.0,
    "bi-weekly": 1.1,
    "weekly": 1.2,
    "2x-week": 1.3,
    "3x-week": 1.4,
    "5x-week": 1.5,
    "daily": 1.6,
}


class PricingEngine:
    """Prices service requests against one ``PricingConfiguration``."""

    def __init__(self, configuration: PricingConfiguration | None):
        if configuration is None:
            raise ConfigurationRequiredError()
        self._configuration = configuration

    @property
    def settings(self) -> PricingConfiguration:
        """The configuration used when a call does not pass its own."""
        return self._configuration

    def update_settings(self, **changes: Any) -> PricingConfiguration:
        """Replace whole configuration fields and return the new configuration."""
        self._configuration = self._configuration.with_updates(**changes)
        return self._configuration

    def calculate_pricing(
        self,
        request: PricingRequest,
        configuration: PricingConfiguration | None = None,
    ) -> PricingBreakdown:
        """Compute the full price breakdown for ``request``.

        ``configuration`` overrides the engine's settings for this call only.
        """
        settings = configuration or self._configuration
        service_type = request.service_type
        service_data = request.service_specific_data or {}

        # 1. Base price
        base_rate = coefficient(settings.service_type_rates, service_type, FALLBACK_BASE_RATE)
        base = compute_base_price(service_type, request.facility_size, service_data, base_rate)

        # 2. Complexity
        complexity_factor = compute_complexity_factor(service_type, service_data)
        adjusted_base_price = base.base_price * complexity_factor

        # 3. Frequency
        frequency_multiplier = coefficient(
            settings.frequency_multipliers, request.service_frequency, FALLBACK_FREQUENCY_MULTIPLIER,
        )
        frequency_adjusted_price = adjusted_base_price * frequency_multiplier

        # 4. Service-specific fees
        service_adjustments = compute_service_adjustments(service_type, service_data, base.base_price)
        adjustments_total = sum(service_adjustments.values())

        # 5. Subtotal
        subtotal = frequency_adjusted_price + adjustments_total

        # 6. Labor (informational)
        labor_hours = compute_labor_hours(service_type, request.facility_size, service_data)
        labor_cost = labor_hours * settings.labor_rate

        # 7. Overhead and margin
        overhead_amount = subtotal * (settings.overhead_percentage / 100)
        margin_amount = subtotal * (settings.margin_percentage / 100)

        # 8. Total
        total = subtotal + overhead_amount + margin_amount

        return PricingBreakdown(
            base_price=round_currency(base.base_price),
            adjustments=round_currency(adjustments_total),
            subtotal=round_currency(subtotal),
            labor_hours=labor_hours,
            labor_rate=round_currency(settings.labor_rate),
            labor_cost=round_currency(labor_cost),
            overhead_percentage=settings.overhead_percentage,
            overhead_amount=round_currency(overhead_amount),
            margin_percentage=settings.margin_percentage,
            margin_amount=round_currency(margin_amount),
            total=round_currency(total),
            frequency_multiplier=frequency_multiplier,
            complexity_factor=complexity_factor,
            service_adjustments={name: round_currency(amount) for name, amount in service_adjustments.items()},
            calculation_details=CalculationDetails(
                base_rate=base_rate,
                unit_type=base.unit_type,
                units=base.units,
                complexity_factor=complexity_factor,
            ),
        )

    def get_quick_estimate(
        self,
        service_type: str,
        facility_size: float,
        frequency: str = "one-time",
    ) -> float:
        """Rough quote: size × rate × frequency, plus overhead and margin.

        Skips complexity, service fees and labor. Rates and multipliers come
        from the configuration, falling back to the quick-estimate tables.
        Frequencies outside the standard set always price at 1.0.
        """
        rates = {
            key: coefficient(self._configuration.service_type_rates, key, default)
            for key, default in QUICK_ESTIMATE_SERVICE_RATES.items()
        }
        multipliers = {
            key: coefficient(self._configuration.frequency_multipliers, key, default)
            for key, default in QUICK_ESTIMATE_FREQUENCY_MULTIPLIERS.items()
        }
        base_rate = rates.get(service_type) or FALLBACK_BASE_RATE
        frequency_multiplier = multipliers.get(frequency) or FALLBACK_FREQUENCY_MULTIPLIER

        base_price = facility_size * base_rate * frequency_multiplier
        overhead = base_price * (self._configuration.overhead_percentage / 100)
        margin = base_price * (self._configuration.margin_percentage / 100)
        return round_currency(base_price + overhead + margin)


# ═══════════════════════════════════════════════════════════════════════════
# Module-level entry points
# ═══════════════════════════════════════════════════════════════════════════

def create_pricing_engine(configuration: PricingConfiguration) -> PricingEngine:
    """Build an engine for ``configuration``."""
    return PricingEngine(configuration)


def calculate_pricing(request: PricingRequest, configuration: PricingConfiguration) -> PricingBreakdown:
    """Price ``request`` with ``configuration`` in one call."""
    return PricingEngine(configuration).calculate_pricing(request)


def get_quick_estimate(
    service_type: str,
    facility_size: float,
    frequency: str,
    configuration: PricingConfiguration,
) -> float:
    """Quick estimate with ``configuration`` in one call."""
    return PricingEngine(configuration).get_quick_estimate(service_type, facility_size, frequency)
