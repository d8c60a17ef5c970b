"""Service-specific fees added on top of the frequency-adjusted price."""

from __future__ import annotations

from typing import Any

from janitorial_pricing.engine.base_price import window_count
from janitorial_pricing.engine.numbers import as_number

# Flat fees ($)
PET_FEE = 25.0
SUPPLIES_FEE = 15.0
AFTER_HOURS_FEE = 50.0
LARGE_FACILITY_FEE = 75.0
PET_ODOR_FEE = 50.0
PROTECTION_TREATMENT_FEE = 35.0
FURNITURE_MOVING_FEE = 75.0
QUICK_DRY_FEE = 25.0

# Per-window fees ($/window)
SCREEN_CLEANING_PER_WINDOW = 2.0
SILL_CLEANING_PER_WINDOW = 1.5

# Height premiums (fraction of base price)
TWO_STORY_PREMIUM = 0.25
THREE_PLUS_STORY_PREMIUM = 0.5


def compute_service_adjustments(
    service_type: str,
    service_data: dict[str, Any],
    base_price: float,
) -> dict[str, float]:
    """Return named fees for the request. Amounts are unrounded."""
    adjustments: dict[str, float] = {}

    if service_type == "residential":
        if service_data.get("pets"):
            adjustments["pets"] = PET_FEE
        if not service_data.get("cleaning_supplies_provided"):
            adjustments["supplies_not_provided"] = SUPPLIES_FEE

    elif service_type == "commercial":
        if service_data.get("cleaning_schedule_preference") == "after_hours":
            adjustments["after_hours"] = AFTER_HOURS_FEE
        if as_number(service_data.get("employee_count")) > 50:
            adjustments["large_facility"] = LARGE_FACILITY_FEE

    elif service_type == "carpet":
        if service_data.get("pet_odors"):
            adjustments["pet_odors"] = PET_ODOR_FEE
        if service_data.get("protection_treatment"):
            adjustments["protection_treatment"] = PROTECTION_TREATMENT_FEE

    elif service_type == "window":
        windows = window_count(service_data)
        if service_data.get("screen_cleaning"):
            adjustments["screen_cleaning"] = windows * SCREEN_CLEANING_PER_WINDOW
        if service_data.get("sill_cleaning"):
            adjustments["sill_cleaning"] = windows * SILL_CLEANING_PER_WINDOW
        story_height = service_data.get("story_height")
        if story_height == "two":
            adjustments["height_premium"] = base_price * TWO_STORY_PREMIUM
        if story_height == "three_plus":
            adjustments["height_premium"] = base_price * THREE_PLUS_STORY_PREMIUM

    elif service_type == "floor":
        if service_data.get("furniture_moving"):
            adjustments["furniture_moving"] = FURNITURE_MOVING_FEE
        if service_data.get("drying_time_preference") == "quick_dry":
            adjustments["quick_dry"] = QUICK_DRY_FEE

    return adjustments
