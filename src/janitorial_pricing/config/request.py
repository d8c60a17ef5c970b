"""Pricing request — one service quote to be priced."""

from __future__ import annotations

from typing import Any, Literal, get_args

from pydantic import BaseModel, Field


ServiceType = Literal["residential", "commercial", "carpet", "window", "floor"]

ServiceFrequency = Literal[
    "one-time",
    "1x-month",
    "bi-weekly",
    "weekly",
    "2x-week",
    "3x-week",
    "5x-week",
    "daily",
]

SERVICE_TYPES: tuple[str, ...] = get_args(ServiceType)
SERVICE_FREQUENCIES: tuple[str, ...] = get_args(ServiceFrequency)


class PricingRequest(BaseModel):
    """Inputs for a single pricing calculation."""

    service_type: ServiceType = Field(default="residential", description="Kind of cleaning service")
    facility_size: float = Field(
        default=0.0, ge=0, allow_inf_nan=False,
        description="Service area in square feet. Window services price by "
                    "service_specific_data.window_count instead.",
    )
    service_frequency: str = Field(
        default="one-time",
        description="Frequency key, e.g. 'weekly' or '2x-week'. Keys missing from "
                    "the configuration price with a 1.0 multiplier.",
    )
    service_specific_data: dict[str, Any] = Field(
        default_factory=dict,
        description="Attributes recognised per service type: bedrooms, bathrooms, pets, "
                    "cleaning_supplies_provided (residential); employee_count, "
                    "cleaning_schedule_preference (commercial); carpet_age, floor_condition, "
                    "pet_odors, protection_treatment (carpet); window_count, story_height, "
                    "exterior_access, screen_cleaning, sill_cleaning (window); floor_condition, "
                    "furniture_moving, drying_time_preference (floor).",
    )
    global_inputs: dict[str, Any] = Field(
        default_factory=dict,
        description="Proposal-wide inputs carried alongside the request. Not priced.",
    )
