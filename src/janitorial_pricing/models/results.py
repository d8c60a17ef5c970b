"""Result types — the contract between the engine, the API and the dashboard.

All currency amounts are already rounded to the cent when a result leaves
the engine.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


# ═══════════════════════════════════════════════════════════════════════════
# Main pricing breakdown
# ═══════════════════════════════════════════════════════════════════════════

class CalculationDetails(BaseModel):
    """How the base price was derived, kept for traceability."""

    base_rate: float
    """Rate per unit actually used (after fallbacks)."""
    unit_type: str
    """'square feet' or 'windows'."""
    units: float
    """Square footage, or window count for window services."""
    complexity_factor: float


class PricingBreakdown(BaseModel):
    """Full price build-up for one request.

    total = subtotal + overhead_amount + margin_amount.
    labor_cost is an estimate for scheduling and is not part of total.
    """

    base_price: float
    """units × base_rate."""
    adjustments: float
    """Sum of service_adjustments."""
    subtotal: float
    """base_price × complexity × frequency_multiplier + adjustments."""

    labor_hours: float
    labor_rate: float
    labor_cost: float

    overhead_percentage: float
    overhead_amount: float
    margin_percentage: float
    margin_amount: float

    total: float

    frequency_multiplier: float
    complexity_factor: float
    service_adjustments: dict[str, float] = Field(default_factory=dict)
    """Named fee → amount, e.g. {'pets': 25.0}."""
    calculation_details: CalculationDetails


# ═══════════════════════════════════════════════════════════════════════════
# Alternate calculation paths
# ═══════════════════════════════════════════════════════════════════════════

class DetailedPricingResult(BaseModel):
    """Output of the simplified per-square-foot calculation.

    Unlike ``PricingBreakdown``, labor cost is included in total here.
    """

    base_price: float
    labor_hours: float
    labor_cost: float
    overhead: float
    margin: float
    total: float
    breakdown: dict[str, float]
    """Keys: base, labor, overhead, margin."""


class FrequencyQuote(BaseModel):
    """One row of a frequency comparison."""

    frequency: str
    frequency_multiplier: float
    subtotal: float
    total: float


# ═══════════════════════════════════════════════════════════════════════════
# Proposal-facing summaries
# ═══════════════════════════════════════════════════════════════════════════

class PriceRange(BaseModel):
    low: float
    high: float


class HoursEstimate(BaseModel):
    min: float
    max: float


class ProductionRateRange(BaseModel):
    min: float
    max: float


class PricingAssumptions(BaseModel):
    labor_rate: float
    overhead_percentage: float
    margin_percentage: float
    production_rate: ProductionRateRange


class ProposalPricingData(BaseModel):
    """Pricing block stored on a proposal and shown to the client."""

    price_range: PriceRange
    hours_estimate: HoursEstimate
    assumptions: PricingAssumptions
    display_price: float
    """Midpoint of price_range."""


# ═══════════════════════════════════════════════════════════════════════════
# Add-ons
# ═══════════════════════════════════════════════════════════════════════════

class AddonLine(BaseModel):
    """One priced add-on."""

    sku: str
    label: str
    unit_type: str
    quantity: float
    rate: float
    subtotal: float
    frequency: str
    monthly_amount: float | None = None
    """Set only for amortized recurring add-ons."""


class AddonSummary(BaseModel):
    """Add-on totals as shown under the main price."""

    recurring: list[AddonLine] = Field(default_factory=list)
    one_time: list[AddonLine] = Field(default_factory=list)
    monthly_total: float = 0.0
    """Monthly equivalent of all recurring add-ons."""
    one_time_total: float = 0.0
