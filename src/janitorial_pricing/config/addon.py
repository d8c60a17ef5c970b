"""Add-on catalog items — extra services quoted next to the main service."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, model_validator


UnitType = Literal["sqft", "pane", "visit", "hour", "flat"]
AddonFrequency = Literal["one_time", "monthly", "quarterly", "annual"]
AddonCategory = Literal["cleaning", "maintenance", "specialty", "seasonal", "other"]
QuantitySource = Literal["manual", "facility_sqft", "windows_count", "auto"]


class AddonItem(BaseModel):
    """One add-on offered in proposals."""

    sku: str = Field(min_length=2, max_length=50, pattern=r"^[a-z0-9_-]+$", description="Catalog key")
    label: str = Field(min_length=3, max_length=100, description="Display name")
    category: AddonCategory | None = None
    unit_type: UnitType = Field(default="flat", description="What one unit of quantity means")
    rate: float = Field(gt=0, description="Price per unit ($)")
    min_qty: float = Field(default=0, ge=0, description="Quantity floor applied when pricing")
    default_frequency: AddonFrequency = "one_time"
    frequency_options: list[AddonFrequency] = Field(default_factory=lambda: ["one_time"], min_length=1)
    amortize_to_monthly: bool = Field(
        default=False,
        description="Spread recurring charges into a monthly amount on the proposal",
    )
    default_qty_source: QuantitySource = Field(
        default="manual",
        description="Where the quantity comes from when none is given: 'facility_sqft' "
                    "and 'windows_count' read the request; 'manual' and 'auto' use min_qty.",
    )
    active: bool = True
    show_in_proposals: bool = True
    description: str | None = Field(default=None, max_length=500)
    notes: str | None = Field(default=None, max_length=1000)

    @model_validator(mode="after")
    def _default_frequency_offered(self) -> AddonItem:
        if self.default_frequency not in self.frequency_options:
            raise ValueError("Default frequency must be one of the selected frequency options")
        return self
