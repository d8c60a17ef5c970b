"""Add-on pricing — extra services quoted alongside the main service.

Recurring add-ons may be amortized to a monthly amount: quarterly charges
are spread over 3 months, annual charges over 12. One-time add-ons are
totalled separately and never enter the monthly total.
"""

from __future__ import annotations

import logging
from typing import Iterable

from janitorial_pricing.config.addon import AddonItem
from janitorial_pricing.engine.numbers import round_currency
from janitorial_pricing.exceptions import AddonFrequencyError
from janitorial_pricing.models.results import AddonLine, AddonSummary

logger = logging.getLogger(__name__)

MONTHS_PER_PERIOD: dict[str, int] = {
    "monthly": 1,
    "quarterly": 3,
    "annual": 12,
}


def calculate_monthly_amount(subtotal: float, frequency: str, amortize: bool) -> float | None:
    """Monthly equivalent of a recurring charge, or None when not amortized."""
    if not amortize:
        return None
    months = MONTHS_PER_PERIOD.get(frequency)
    if months is None:
        return None
    if months == 1:
        return subtotal
    return round_currency(subtotal / months)


def resolve_quantity(
    addon: AddonItem,
    quantity: float | None,
    facility_size: float = 0.0,
    window_count: float = 0.0,
) -> float:
    """Quantity to price: explicit, else from the item's source, floored at min_qty."""
    if quantity is None:
        if addon.default_qty_source == "facility_sqft":
            quantity = facility_size
        elif addon.default_qty_source == "windows_count":
            quantity = window_count
        else:
            quantity = addon.min_qty
    return max(float(quantity), addon.min_qty)


def price_addon(
    addon: AddonItem,
    quantity: float | None = None,
    frequency: str | None = None,
    facility_size: float = 0.0,
    window_count: float = 0.0,
) -> AddonLine:
    """Price one add-on selection.

    Raises ``AddonFrequencyError`` if ``frequency`` is not offered by the item.
    """
    frequency = frequency or addon.default_frequency
    if frequency not in addon.frequency_options:
        raise AddonFrequencyError(
            f"Add-on {addon.sku!r} is not offered {frequency!r}; "
            f"choose one of {', '.join(addon.frequency_options)}"
        )

    qty = resolve_quantity(addon, quantity, facility_size, window_count)
    subtotal = round_currency(qty * addon.rate)

    return AddonLine(
        sku=addon.sku,
        label=addon.label,
        unit_type=addon.unit_type,
        quantity=qty,
        rate=addon.rate,
        subtotal=subtotal,
        frequency=frequency,
        monthly_amount=calculate_monthly_amount(subtotal, frequency, addon.amortize_to_monthly),
    )


def summarize_addons(lines: Iterable[AddonLine]) -> AddonSummary:
    """Split lines into recurring and one-time, and total each."""
    summary = AddonSummary()
    monthly_total = 0.0
    one_time_total = 0.0

    for line in lines:
        months = MONTHS_PER_PERIOD.get(line.frequency)
        if months is None:
            summary.one_time.append(line)
            one_time_total += line.subtotal
            continue

        summary.recurring.append(line)
        if line.monthly_amount is not None:
            monthly_total += line.monthly_amount
        else:
            monthly_total += line.subtotal / months

    summary.monthly_total = round_currency(monthly_total)
    summary.one_time_total = round_currency(one_time_total)
    logger.debug(
        "Add-on summary: %d recurring, %d one-time, monthly %.2f",
        len(summary.recurring), len(summary.one_time), summary.monthly_total,
    )
    return summary
