"""Typed service-specific details, as collected by the proposal form.

The engine reads ``service_specific_data`` as a loose dict. These models are
for callers that want to reject malformed form data before pricing.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class _ServiceDetails(BaseModel):
    model_config = ConfigDict(extra="allow")


class ResidentialDetails(_ServiceDetails):
    """Home cleaning."""

    home_type: Literal["apartment", "house", "condo", "townhouse"] = "house"
    bedrooms: int = Field(default=0, ge=0)
    bathrooms: float = Field(default=0, ge=0)
    pets: bool = False
    cleaning_supplies_provided: bool = False


class CommercialDetails(_ServiceDetails):
    """Office and facility janitorial."""

    employee_count: int = Field(default=0, ge=0)
    cleaning_schedule_preference: Literal["before_hours", "after_hours", "during_hours"] = "after_hours"


class CarpetDetails(_ServiceDetails):
    """Carpet cleaning."""

    carpet_type: Literal["wool", "nylon", "polyester", "olefin", "unknown"] = "unknown"
    carpet_age: Literal["new", "1-3_years", "3-5_years", "5+_years"] = "new"
    floor_condition: Literal["excellent", "good", "fair", "poor"] = "good"
    pet_odors: bool = False
    protection_treatment: bool = False


class WindowDetails(_ServiceDetails):
    """Window washing."""

    window_count: int = Field(default=1, ge=1)
    story_height: Literal["single", "two", "three_plus"] = "single"
    window_types: list[Literal["standard", "french", "bay", "skylight", "storm"]] = Field(default_factory=list)
    screen_cleaning: bool = False
    sill_cleaning: bool = False
    exterior_access: Literal["ground_level", "ladder_required", "lift_required"] = "ground_level"


class FloorDetails(_ServiceDetails):
    """Hard-floor care."""

    floor_types: list[Literal["hardwood", "tile", "laminate", "vinyl", "concrete", "marble"]] = Field(
        default_factory=lambda: ["tile"], min_length=1,
    )
    floor_condition: Literal["excellent", "good", "fair", "poor"] = "good"
    treatment_needed: list[Literal["deep_clean", "strip_wax", "refinish", "seal", "polish"]] = Field(
        default_factory=list,
    )
    furniture_moving: bool = False
    drying_time_preference: Literal["standard", "quick_dry", "overnight"] = "standard"


SERVICE_DETAIL_MODELS: dict[str, type[_ServiceDetails]] = {
    "residential": ResidentialDetails,
    "commercial": CommercialDetails,
    "carpet": CarpetDetails,
    "window": WindowDetails,
    "floor": FloorDetails,
}


def validate_service_details(service_type: str, data: dict[str, Any]) -> _ServiceDetails:
    """Validate ``data`` against the detail model for ``service_type``.

    Raises ``pydantic.ValidationError`` on bad values. Unknown service types
    validate against an empty model that accepts any keys.
    """
    model_cls = SERVICE_DETAIL_MODELS.get(service_type, _ServiceDetails)
    return model_cls.model_validate(data)
