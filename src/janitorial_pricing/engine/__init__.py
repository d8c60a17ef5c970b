"""Engine — pricing computation logic."""

from janitorial_pricing.engine.base_price import compute_base_price
from janitorial_pricing.engine.complexity import compute_complexity_factor
from janitorial_pricing.engine.adjustments import compute_service_adjustments
from janitorial_pricing.engine.labor import compute_labor_hours
from janitorial_pricing.engine.pricing_engine import (
    PricingEngine,
    calculate_pricing,
    create_pricing_engine,
    get_quick_estimate,
)
from janitorial_pricing.engine.legacy import calculate_detailed_pricing, calculate_quick_estimate
from janitorial_pricing.engine.proposal import build_proposal_pricing_data
from janitorial_pricing.engine.addons import calculate_monthly_amount, price_addon, summarize_addons
from janitorial_pricing.engine.comparison import compare_frequencies

__all__ = [
    "compute_base_price",
    "compute_complexity_factor",
    "compute_service_adjustments",
    "compute_labor_hours",
    "PricingEngine",
    "calculate_pricing",
    "create_pricing_engine",
    "get_quick_estimate",
    # Alternate paths
    "calculate_quick_estimate",
    "calculate_detailed_pricing",
    # Proposal helpers
    "build_proposal_pricing_data",
    "calculate_monthly_amount",
    "price_addon",
    "summarize_addons",
    "compare_frequencies",
]
