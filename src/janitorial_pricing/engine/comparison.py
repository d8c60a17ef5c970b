"""Price one request at several service frequencies side by side."""

from __future__ import annotations

from typing import Iterable

from janitorial_pricing.config.request import SERVICE_FREQUENCIES, PricingRequest
from janitorial_pricing.engine.pricing_engine import PricingEngine
from janitorial_pricing.models.results import FrequencyQuote


def compare_frequencies(
    engine: PricingEngine,
    request: PricingRequest,
    frequencies: Iterable[str] | None = None,
) -> list[FrequencyQuote]:
    """Return one quote per frequency, in the order given.

    Defaults to every standard frequency. The request's own frequency is
    ignored.
    """
    quotes: list[FrequencyQuote] = []
    for frequency in SERVICE_FREQUENCIES if frequencies is None else frequencies:
        breakdown = engine.calculate_pricing(request.model_copy(update={"service_frequency": frequency}))
        quotes.append(FrequencyQuote(
            frequency=frequency,
            frequency_multiplier=breakdown.frequency_multiplier,
            subtotal=breakdown.subtotal,
            total=breakdown.total,
        ))
    return quotes
