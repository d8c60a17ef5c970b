"""Display formatting for amounts, rates and frequencies (US dollars)."""

from __future__ import annotations

import re

from janitorial_pricing.engine.numbers import round_currency

UNIT_TYPE_LABELS: dict[str, str] = {
    "sqft": "Square Foot",
    "pane": "Window Pane",
    "visit": "Visit",
    "hour": "Hour",
    "flat": "Flat Rate",
}

FREQUENCY_LABELS: dict[str, str] = {
    "one-time": "One Time",
    "1x-month": "Once a Month",
    "bi-weekly": "Every Two Weeks",
    "weekly": "Weekly",
    "2x-week": "Twice a Week",
    "3x-week": "Three Times a Week",
    "5x-week": "Five Times a Week",
    "daily": "Daily",
    # add-on billing frequencies
    "one_time": "One Time",
    "monthly": "Monthly",
    "quarterly": "Quarterly",
    "annual": "Annual",
}


def format_currency(amount: float) -> str:
    """$1,234.50 style; negatives as -$10.50."""
    rounded = round_currency(amount)
    sign = "-" if rounded < 0 else ""
    return f"{sign}${abs(rounded):,.2f}"


def format_percentage(value: float) -> str:
    """One decimal place: 15 → '15.0%'."""
    return f"{value:.1f}%"


def format_pricing(rate: float, unit_type: str) -> str:
    """Rate with its unit: '$8.00 / Window Pane'."""
    return f"{format_currency(rate)} / {UNIT_TYPE_LABELS.get(unit_type, unit_type)}"


def format_frequency(frequency: str) -> str:
    """Human label for a frequency key; unknown keys are title-cased."""
    label = FREQUENCY_LABELS.get(frequency)
    if label:
        return label
    return re.sub(r"[-_]+", " ", frequency).strip().title()


def generate_sku_from_label(label: str) -> str:
    """'Carpet Cleaning (Premium)' → 'carpet_cleaning_premium'."""
    sku = re.sub(r"[^a-z0-9]+", "_", label.lower().strip())
    return sku.strip("_")
