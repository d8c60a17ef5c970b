"""Shared test fixtures — sample settings and requests matching default_pricing.yaml."""

from __future__ import annotations

import pytest

from janitorial_pricing.config import PricingConfiguration, PricingRequest
from janitorial_pricing.config.addon import AddonItem
from janitorial_pricing.engine import PricingEngine


@pytest.fixture
def configuration() -> PricingConfiguration:
    return PricingConfiguration(
        labor_rate=35.0,
        overhead_percentage=15.0,
        margin_percentage=25.0,
        service_type_rates={
            "residential": 0.15,
            "commercial": 0.20,
            "carpet": 0.12,
            "window": 0.25,
            "floor": 0.18,
        },
        frequency_multipliers={
            "one-time": 1.0,
            "1x-month": 1.0,
            "bi-weekly": 1.1,
            "weekly": 1.2,
            "2x-week": 1.3,
            "3x-week": 1.4,
            "5x-week": 1.5,
            "daily": 1.6,
        },
    )


@pytest.fixture
def flat_configuration() -> PricingConfiguration:
    """Round numbers: $0.10/sq ft, 10% overhead, 20% margin."""
    return PricingConfiguration(
        labor_rate=40.0,
        overhead_percentage=10.0,
        margin_percentage=20.0,
        service_type_rates={
            "residential": 0.10,
            "commercial": 0.10,
            "carpet": 0.10,
            "window": 5.0,
            "floor": 0.10,
        },
        frequency_multipliers={"one-time": 1.0, "weekly": 1.5},
    )


@pytest.fixture
def engine(configuration: PricingConfiguration) -> PricingEngine:
    return PricingEngine(configuration)


@pytest.fixture
def residential_request() -> PricingRequest:
    return PricingRequest(
        service_type="residential",
        facility_size=2500,
        service_frequency="2x-week",
        service_specific_data={"bedrooms": 3, "bathrooms": 2, "pets": True},
    )


@pytest.fixture
def window_request() -> PricingRequest:
    return PricingRequest(
        service_type="window",
        service_frequency="one-time",
        service_specific_data={
            "window_count": 150,
            "story_height": "two",
            "screen_cleaning": True,
        },
    )


@pytest.fixture
def quarterly_addon() -> AddonItem:
    return AddonItem(
        sku="window_washing",
        label="Exterior Window Washing",
        category="cleaning",
        unit_type="pane",
        rate=6.0,
        min_qty=10,
        default_frequency="quarterly",
        frequency_options=["one_time", "quarterly", "annual"],
        amortize_to_monthly=True,
        default_qty_source="windows_count",
    )


@pytest.fixture
def one_time_addon() -> AddonItem:
    return AddonItem(
        sku="strip_wax",
        label="Strip and Wax",
        unit_type="sqft",
        rate=0.35,
        default_frequency="one_time",
        frequency_options=["one_time"],
        default_qty_source="facility_sqft",
    )
