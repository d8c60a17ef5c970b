"""Result models — pricing output contracts."""

from janitorial_pricing.models.results import (
    AddonLine,
    AddonSummary,
    CalculationDetails,
    DetailedPricingResult,
    FrequencyQuote,
    PricingBreakdown,
    ProposalPricingData,
)

__all__ = [
    "AddonLine",
    "AddonSummary",
    "CalculationDetails",
    "DetailedPricingResult",
    "FrequencyQuote",
    "PricingBreakdown",
    "ProposalPricingData",
]
