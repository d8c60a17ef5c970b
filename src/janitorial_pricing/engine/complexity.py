"""Complexity factor — multiplicative difficulty loading on the base price.

Each condition adds its bump independently. Thresholds on the same attribute
are not tiers: a commercial site with 150 employees gets both the >100 and
the >50 bump (+0.30).
"""

from __future__ import annotations

from typing import Any

from janitorial_pricing.engine.numbers import as_number


def compute_complexity_factor(service_type: str, service_data: dict[str, Any]) -> float:
    """Return the complexity factor for a request, never below 1.0."""
    factor = 1.0

    if service_type == "residential":
        if as_number(service_data.get("bedrooms")) > 4:
            factor += 0.1
        if as_number(service_data.get("bathrooms")) > 3:
            factor += 0.1
        if service_data.get("pets"):
            factor += 0.05

    elif service_type == "commercial":
        employees = as_number(service_data.get("employee_count"))
        if employees > 100:
            factor += 0.2
        if employees > 50:
            factor += 0.1
        if service_data.get("cleaning_schedule_preference") == "during_hours":
            factor += 0.15

    elif service_type == "carpet":
        carpet_age = service_data.get("carpet_age")
        if carpet_age == "5+_years":
            factor += 0.15
        if carpet_age == "3-5_years":
            factor += 0.1
        if service_data.get("floor_condition") == "poor":
            factor += 0.2

    elif service_type == "window":
        story_height = service_data.get("story_height")
        if story_height == "three_plus":
            factor += 0.3
        if story_height == "two":
            factor += 0.15
        exterior_access = service_data.get("exterior_access")
        if exterior_access == "lift_required":
            factor += 0.4
        if exterior_access == "ladder_required":
            factor += 0.2

    elif service_type == "floor":
        condition = service_data.get("floor_condition")
        if condition == "poor":
            factor += 0.25
        if condition == "fair":
            factor += 0.15
        if service_data.get("furniture_moving"):
            factor += 0.2

    return max(1.0, factor)
