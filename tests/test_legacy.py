"""Tests for engine/legacy.py — flat-rate quick estimate and detailed pricing."""

from __future__ import annotations

import pytest

from janitorial_pricing.config import PricingConfiguration
from janitorial_pricing.engine import calculate_detailed_pricing, calculate_quick_estimate


class TestLegacyQuickEstimate:

    def test_residential_one_time(self, configuration: PricingConfiguration):
        assert calculate_quick_estimate("residential", 1000, "one-time", configuration) == pytest.approx(150.0)

    def test_commercial_weekly(self, configuration: PricingConfiguration):
        # 1000 × 0.15 × 1.2 (weekly) × 1.2 (commercial)
        assert calculate_quick_estimate("commercial", 1000, "weekly", configuration) == pytest.approx(216.0)

    def test_service_multipliers(self, configuration: PricingConfiguration):
        one = calculate_quick_estimate("residential", 1000, "one-time", configuration)
        assert calculate_quick_estimate("window", 1000, "one-time", configuration) == pytest.approx(one * 1.3)
        assert calculate_quick_estimate("floor", 1000, "one-time", configuration) == pytest.approx(one * 1.15, abs=0.01)

    def test_unknown_service_and_frequency(self, configuration: PricingConfiguration):
        assert calculate_quick_estimate("pool", 1000, "fortnightly", configuration) == pytest.approx(150.0)

    def test_configured_custom_frequency(self):
        config = PricingConfiguration(frequency_multipliers={"custom": 2.0})
        assert calculate_quick_estimate("residential", 1000, "custom", config) == pytest.approx(300.0)


class TestDetailedPricing:

    def test_labor_included_in_total(self, configuration: PricingConfiguration):
        result = calculate_detailed_pricing("commercial", 2000, "one-time", configuration)
        assert result.labor_hours == 2.0
        assert result.labor_cost == pytest.approx(70.0)
        assert result.base_price == pytest.approx(300.0)
        assert result.overhead == pytest.approx(45.0)
        assert result.margin == pytest.approx(75.0)
        assert result.total == pytest.approx(490.0)

    def test_breakdown_keys(self, configuration: PricingConfiguration):
        result = calculate_detailed_pricing("residential", 2000, "weekly", configuration)
        assert set(result.breakdown) == {"base", "labor", "overhead", "margin"}
        assert result.breakdown["base"] == result.base_price
        assert result.breakdown["labor"] == result.labor_cost

    def test_service_type_does_not_change_result(self, configuration: PricingConfiguration):
        a = calculate_detailed_pricing("residential", 3000, "weekly", configuration)
        b = calculate_detailed_pricing("window", 3000, "weekly", configuration)
        assert a == b

    def test_zero_percentages_fall_back(self):
        config = PricingConfiguration(overhead_percentage=0, margin_percentage=0)
        result = calculate_detailed_pricing("residential", 2000, "one-time", config)
        # overhead 20%, margin 15% of 300
        assert result.overhead == pytest.approx(60.0)
        assert result.margin == pytest.approx(45.0)

    def test_zero_size(self, configuration: PricingConfiguration):
        result = calculate_detailed_pricing("residential", 0, "daily", configuration)
        assert result.total == 0.0
        assert result.labor_hours == 0.0
