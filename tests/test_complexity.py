"""Tests for engine/complexity.py."""

from __future__ import annotations

import pytest

from janitorial_pricing.engine.complexity import compute_complexity_factor


@pytest.mark.parametrize(
    "service_type, data, expected",
    [
        ("residential", {}, 1.0),
        ("residential", {"bedrooms": 4, "bathrooms": 3}, 1.0),
        ("residential", {"bedrooms": 5}, 1.1),
        ("residential", {"bathrooms": 3.5}, 1.1),
        ("residential", {"bedrooms": 5, "bathrooms": 4, "pets": True}, 1.25),
        ("commercial", {"employee_count": 50}, 1.0),
        ("commercial", {"employee_count": 51}, 1.1),
        ("commercial", {"employee_count": 101}, 1.3),
        ("commercial", {"cleaning_schedule_preference": "during_hours"}, 1.15),
        ("commercial", {"cleaning_schedule_preference": "after_hours"}, 1.0),
        ("carpet", {"carpet_age": "5+_years"}, 1.15),
        ("carpet", {"carpet_age": "3-5_years"}, 1.1),
        ("carpet", {"carpet_age": "1-3_years", "floor_condition": "poor"}, 1.2),
        ("window", {"story_height": "two"}, 1.15),
        ("window", {"story_height": "three_plus", "exterior_access": "lift_required"}, 1.7),
        ("window", {"exterior_access": "ladder_required"}, 1.2),
        ("floor", {"floor_condition": "fair"}, 1.15),
        ("floor", {"floor_condition": "poor", "furniture_moving": True}, 1.45),
        ("floor", {"floor_condition": "good"}, 1.0),
    ],
)
def test_complexity_table(service_type, data, expected):
    assert compute_complexity_factor(service_type, data) == pytest.approx(expected)


def test_unknown_service_type():
    assert compute_complexity_factor("pool", {"bedrooms": 10}) == 1.0


def test_attributes_of_other_service_types_ignored():
    # Residential attributes on a commercial request change nothing
    assert compute_complexity_factor("commercial", {"bedrooms": 10, "pets": True}) == 1.0


def test_string_numbers_are_read():
    assert compute_complexity_factor("commercial", {"employee_count": "75"}) == pytest.approx(1.1)


def test_never_below_one():
    assert compute_complexity_factor("residential", {"bedrooms": -3}) == 1.0
