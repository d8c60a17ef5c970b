"""Labor-hour estimate, independent of price.

Production rates here are crew throughput assumptions (sq ft or windows
per hour), fixed per service type.
"""

from __future__ import annotations

import math
from typing import Any

from janitorial_pricing.engine.base_price import window_count
from janitorial_pricing.engine.numbers import as_number

RESIDENTIAL_SQFT_PER_HOUR = 400
COMMERCIAL_SQFT_PER_HOUR = 600
CARPET_SQFT_PER_HOUR = 300
FLOOR_SQFT_PER_HOUR = 250
WINDOWS_PER_HOUR = 12
TWO_STORY_WINDOWS_PER_EXTRA_HOUR = 20
THREE_PLUS_STORY_WINDOWS_PER_EXTRA_HOUR = 15

MIN_LABOR_HOURS = 1.0


def compute_labor_hours(service_type: str, facility_size: float, service_data: dict[str, Any]) -> float:
    """Estimate crew hours for one visit, at least ``MIN_LABOR_HOURS``."""
    hours = 0.0

    if service_type == "residential":
        hours = math.ceil(facility_size / RESIDENTIAL_SQFT_PER_HOUR)
        if as_number(service_data.get("bedrooms")) > 3:
            hours += 1
        if as_number(service_data.get("bathrooms")) > 2:
            hours += 0.5

    elif service_type == "commercial":
        hours = math.ceil(facility_size / COMMERCIAL_SQFT_PER_HOUR)
        if as_number(service_data.get("employee_count")) > 50:
            hours += 2

    elif service_type == "carpet":
        hours = math.ceil(facility_size / CARPET_SQFT_PER_HOUR)
        if service_data.get("pet_odors"):
            hours += 1
        if service_data.get("protection_treatment"):
            hours += 0.5

    elif service_type == "window":
        windows = window_count(service_data)
        hours = math.ceil(windows / WINDOWS_PER_HOUR)
        story_height = service_data.get("story_height")
        if story_height == "two":
            hours += math.ceil(windows / TWO_STORY_WINDOWS_PER_EXTRA_HOUR)
        if story_height == "three_plus":
            hours += math.ceil(windows / THREE_PLUS_STORY_WINDOWS_PER_EXTRA_HOUR)

    elif service_type == "floor":
        hours = math.ceil(facility_size / FLOOR_SQFT_PER_HOUR)
        if service_data.get("furniture_moving"):
            hours += 2

    return float(max(MIN_LABOR_HOURS, hours))
