"""Narrative generator — plain-English explanation of a price breakdown.

Produces the pricing rationale that goes into an AI-drafted proposal, and a
short comparison of frequency options.
"""

from __future__ import annotations

from janitorial_pricing.config.request import PricingRequest
from janitorial_pricing.formatting import format_currency, format_frequency, format_percentage
from janitorial_pricing.models.results import FrequencyQuote, PricingBreakdown

_ADJUSTMENT_LABELS = {
    "pets": "Pet cleaning fee",
    "supplies_not_provided": "Cleaning supplies",
    "after_hours": "After-hours service",
    "large_facility": "Large facility fee",
    "pet_odors": "Pet odor treatment",
    "protection_treatment": "Carpet protection treatment",
    "screen_cleaning": "Screen cleaning",
    "sill_cleaning": "Sill cleaning",
    "height_premium": "Multi-story height premium",
    "furniture_moving": "Furniture moving",
    "quick_dry": "Quick-dry service",
}


def _heading(title: str) -> list[str]:
    return ["=" * 60, title, "=" * 60]


def generate_pricing_narrative(request: PricingRequest, breakdown: PricingBreakdown) -> str:
    """Explain how the total was reached.

    Sections:
      1. Service summary
      2. Price build-up
      3. Service adjustments
      4. Labor estimate
    """
    details = breakdown.calculation_details
    sections: list[str] = []

    # ── 1. Service summary ──
    sections.extend(_heading("SERVICE SUMMARY"))
    sections.append(
        f"Service: {request.service_type.title()} cleaning\n"
        f"Frequency: {format_frequency(request.service_frequency)}\n"
        f"Size: {details.units:,.0f} {details.unit_type}\n"
        f"Price per visit: {format_currency(breakdown.total)}"
    )

    # ── 2. Price build-up ──
    sections.append("")
    sections.extend(_heading("PRICE BUILD-UP"))
    sections.append(
        f"Base price: {details.units:,.0f} {details.unit_type} × "
        f"{format_currency(details.base_rate)} = {format_currency(breakdown.base_price)}"
    )
    if breakdown.complexity_factor > 1.0:
        sections.append(
            f"Complexity: ×{breakdown.complexity_factor:.2f} for site conditions "
            f"(+{(breakdown.complexity_factor - 1) * 100:.0f}%)"
        )
    else:
        sections.append("Complexity: standard (×1.00)")
    sections.append(f"Frequency multiplier: ×{breakdown.frequency_multiplier:.2f}")
    sections.append(f"Service adjustments: {format_currency(breakdown.adjustments)}")
    sections.append(f"Subtotal: {format_currency(breakdown.subtotal)}")
    sections.append(
        f"Overhead ({format_percentage(breakdown.overhead_percentage)}): "
        f"{format_currency(breakdown.overhead_amount)}"
    )
    sections.append(
        f"Margin ({format_percentage(breakdown.margin_percentage)}): "
        f"{format_currency(breakdown.margin_amount)}"
    )
    sections.append(f"TOTAL: {format_currency(breakdown.total)}")

    # ── 3. Service adjustments ──
    sections.append("")
    sections.extend(_heading("SERVICE ADJUSTMENTS"))
    if breakdown.service_adjustments:
        for name, amount in breakdown.service_adjustments.items():
            label = _ADJUSTMENT_LABELS.get(name, name.replace("_", " ").capitalize())
            sections.append(f"  {label:32s}  {format_currency(amount):>12s}")
    else:
        sections.append("  None")

    # ── 4. Labor estimate ──
    sections.append("")
    sections.extend(_heading("LABOR ESTIMATE"))
    sections.append(
        f"Estimated crew time: {breakdown.labor_hours:g} hours at "
        f"{format_currency(breakdown.labor_rate)}/hour = {format_currency(breakdown.labor_cost)}\n"
        f"Labor is a scheduling estimate and is not added to the total."
    )

    return "\n".join(sections)


def generate_comparison_narrative(quotes: list[FrequencyQuote]) -> str:
    """Summarise a frequency comparison: cheapest and most expensive option."""
    if not quotes:
        return "No frequencies were compared."

    cheapest = min(quotes, key=lambda q: q.total)
    priciest = max(quotes, key=lambda q: q.total)

    lines = [f"Compared {len(quotes)} service frequencies (price per visit):"]
    for q in quotes:
        lines.append(
            f"  {format_frequency(q.frequency):20s}  ×{q.frequency_multiplier:.2f}  {format_currency(q.total):>12s}"
        )
    lines.append("")
    lines.append(
        f"Lowest per-visit price: {format_frequency(cheapest.frequency)} at {format_currency(cheapest.total)}."
    )
    if priciest.total > cheapest.total:
        spread = priciest.total - cheapest.total
        lines.append(
            f"Highest: {format_frequency(priciest.frequency)} at {format_currency(priciest.total)} "
            f"({format_currency(spread)} more per visit)."
        )
    else:
        lines.append("All frequencies price the same per visit.")
    return "\n".join(lines)
