"""Tests for the LLM-accessible API layer.

Covers:
  - Context manifest (compact + full)
  - Schema / defaults endpoints
  - Pricing endpoints (/calculate, /estimate, /detailed, /compare, /narrative)
  - Add-on quotes
  - Deep merge utility
  - Narrative generation
  - Tool definitions
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from janitorial_pricing import __version__
from janitorial_pricing.api.server import app, _deep_merge, _build_configuration
from janitorial_pricing.api.context import build_context, get_pricing_schemas, _extract_params
from janitorial_pricing.api.narrative import generate_comparison_narrative, generate_pricing_narrative
from janitorial_pricing.api.tools import get_anthropic_tools, get_openai_tools, get_system_prompt
from janitorial_pricing.config import PricingConfiguration, PricingRequest
from janitorial_pricing.engine import PricingEngine, compare_frequencies


client = TestClient(app)

RESIDENTIAL = {
    "service_type": "residential",
    "facility_size": 2500,
    "service_frequency": "2x-week",
    "service_specific_data": {"bedrooms": 3, "bathrooms": 2, "pets": True},
}

WINDOW_WASHING = {
    "sku": "window_washing",
    "label": "Exterior Window Washing",
    "unit_type": "pane",
    "rate": 6.0,
    "min_qty": 10,
    "default_frequency": "quarterly",
    "frequency_options": ["one_time", "quarterly", "annual"],
    "amortize_to_monthly": True,
    "default_qty_source": "windows_count",
}


# ═══════════════════════════════════════════════════════════════════════════
# Context manifest tests
# ═══════════════════════════════════════════════════════════════════════════


class TestContext:
    """Tests for the context manifest generator."""

    def test_build_context_full(self):
        ctx = build_context("full")
        assert ctx.service_name == "Janitorial Pricing API"
        assert ctx.version == __version__
        assert len(ctx.pricing_model) > 100
        assert len(ctx.key_formulas) >= 5
        assert len(ctx.input_sections) == 8
        assert len(ctx.key_outputs) >= 10
        assert len(ctx.endpoints) >= 8
        assert len(ctx.interpretation_guide) > 100
        assert len(ctx.example_queries) >= 5

    def test_build_context_compact(self):
        ctx = build_context("compact")
        assert ctx.pricing_model == ""
        assert ctx.key_formulas == []
        assert ctx.interpretation_guide == ""
        assert ctx.example_queries == []
        assert len(ctx.input_sections) == 8

    def test_extract_params(self):
        params = {p.name: p for p in _extract_params(PricingConfiguration)}
        assert params["labor_rate"].default == 35.0
        assert params["labor_rate"].constraints == {"gt": 0}
        assert params["frequency_multipliers"].default["weekly"] == 1.2

    def test_required_fields_have_no_default(self):
        from janitorial_pricing.config.addon import AddonItem
        params = {p.name: p for p in _extract_params(AddonItem)}
        assert params["sku"].default is None
        assert params["sku"].constraints["min_length"] == 2

    def test_schemas(self):
        schemas = get_pricing_schemas()
        assert "service_type" in schemas["request"]["properties"]
        assert "labor_rate" in schemas["settings"]["properties"]


# ═══════════════════════════════════════════════════════════════════════════
# Info endpoints
# ═══════════════════════════════════════════════════════════════════════════


class TestInfoEndpoints:

    def test_health(self):
        r = client.get("/health")
        assert r.status_code == 200
        assert r.json() == {"status": "ok"}

    def test_root(self):
        r = client.get("/")
        assert r.status_code == 200
        assert r.json()["start_here"].startswith("GET /context")

    def test_context_endpoint(self):
        r = client.get("/context", params={"detail_level": "compact"})
        assert r.status_code == 200
        assert r.json()["pricing_model"] == ""

    def test_context_bad_level(self):
        assert client.get("/context", params={"detail_level": "huge"}).status_code == 422

    def test_schema_endpoint(self):
        r = client.get("/schema")
        assert r.status_code == 200
        assert set(r.json()) == {"request", "settings"}

    def test_defaults_endpoint(self):
        r = client.get("/settings/defaults")
        assert r.status_code == 200
        assert r.json()["labor_rate"] == 35.0
        assert r.json()["frequency_multipliers"]["daily"] == 1.6


# ═══════════════════════════════════════════════════════════════════════════
# Pricing endpoints
# ═══════════════════════════════════════════════════════════════════════════


class TestCalculate:

    def test_calculate(self):
        r = client.post("/pricing/calculate", json={"request": RESIDENTIAL})
        assert r.status_code == 200
        data = r.json()
        assert data["pricing"]["total"] == pytest.approx(772.63, abs=0.01)
        assert data["pricing"]["service_adjustments"] == {"pets": 25.0, "supplies_not_provided": 15.0}
        assert data["proposal_pricing"]["price_range"]["low"] == pytest.approx(695.37, abs=0.02)
        assert data["input"]["facility_size"] == 2500

    def test_empty_body_prices_default_request(self):
        r = client.post("/pricing/calculate", json={})
        assert r.status_code == 200
        assert r.json()["pricing"]["base_price"] == 0.0

    def test_settings_override(self):
        r = client.post("/pricing/calculate", json={"request": RESIDENTIAL, "settings": {"margin_percentage": 0}})
        pricing = r.json()["pricing"]
        assert pricing["margin_amount"] == 0.0
        assert pricing["total"] == pytest.approx(634.66, abs=0.01)

    def test_nested_override_keeps_other_keys(self):
        r = client.post(
            "/pricing/calculate",
            json={"request": RESIDENTIAL, "settings": {"frequency_multipliers": {"2x-week": 2.0}}},
        )
        assert r.json()["pricing"]["frequency_multiplier"] == 2.0

    def test_invalid_settings_rejected(self):
        r = client.post("/pricing/calculate", json={"request": RESIDENTIAL, "settings": {"labor_rate": -1}})
        assert r.status_code == 422

    def test_invalid_request_rejected(self):
        r = client.post("/pricing/calculate", json={"request": {"facility_size": -10}})
        assert r.status_code == 422

    def test_strict_rejects_bad_details(self):
        body = {
            "request": {"service_type": "carpet", "facility_size": 500, "service_specific_data": {"carpet_age": "ancient"}},
            "strict": True,
        }
        r = client.post("/pricing/calculate", json=body)
        assert r.status_code == 422
        assert r.json()["detail"][0]["loc"] == ["carpet_age"]

    def test_lenient_by_default(self):
        body = {"request": {"service_type": "carpet", "facility_size": 500, "service_specific_data": {"carpet_age": "ancient"}}}
        assert client.post("/pricing/calculate", json=body).status_code == 200


class TestEstimate:

    def test_estimate(self):
        r = client.get("/pricing/estimate", params={"service_type": "residential", "service_frequency": "weekly"})
        assert r.status_code == 200
        data = r.json()
        assert data["estimate"] == pytest.approx(252.0)
        assert data["input"]["facility_size"] == 1000

    def test_estimate_with_size(self):
        r = client.get(
            "/pricing/estimate",
            params={"service_type": "residential", "service_frequency": "one-time", "facility_size": 2000},
        )
        assert r.json()["estimate"] == pytest.approx(420.0)

    @pytest.mark.parametrize("params", [{}, {"service_type": "residential"}, {"service_frequency": "weekly"}])
    def test_missing_parameters(self, params):
        assert client.get("/pricing/estimate", params=params).status_code == 400


class TestOtherPricingEndpoints:

    def test_detailed(self):
        body = {"request": {"service_type": "commercial", "facility_size": 2000, "service_frequency": "one-time"}}
        r = client.post("/pricing/detailed", json=body)
        assert r.status_code == 200
        assert r.json()["total"] == pytest.approx(490.0)
        assert r.json()["labor_hours"] == 2.0

    def test_detailed_strict_rejects_bad_details(self):
        body = {
            "request": {"service_type": "carpet", "facility_size": 500, "service_specific_data": {"carpet_age": "ancient"}},
            "strict": True,
        }
        r = client.post("/pricing/detailed", json=body)
        assert r.status_code == 422
        assert r.json()["detail"][0]["loc"] == ["carpet_age"]

    def test_compare(self):
        r = client.post("/pricing/compare", json={"request": RESIDENTIAL, "frequencies": ["weekly", "daily"]})
        assert r.status_code == 200
        data = r.json()
        assert [q["frequency"] for q in data["quotes"]] == ["weekly", "daily"]
        assert data["quotes"][1]["total"] > data["quotes"][0]["total"]
        assert "Compared 2" in data["comparison_narrative"]

    def test_compare_all(self):
        r = client.post("/pricing/compare", json={"request": RESIDENTIAL})
        assert len(r.json()["quotes"]) == 8

    def test_compare_empty_list(self):
        r = client.post("/pricing/compare", json={"request": RESIDENTIAL, "frequencies": []})
        assert r.status_code == 200
        assert r.json()["quotes"] == []
        assert r.json()["comparison_narrative"] == "No frequencies were compared."

    def test_calculate_huge_facility(self):
        body = {"request": {"service_type": "commercial", "facility_size": 1e27}}
        r = client.post("/pricing/calculate", json=body)
        assert r.status_code == 200
        assert r.json()["pricing"]["total"] > 0

    def test_narrative(self):
        r = client.post("/pricing/narrative", json={"request": RESIDENTIAL})
        assert r.status_code == 200
        data = r.json()
        assert "PRICE BUILD-UP" in data["narrative"]
        assert data["headline_metrics"]["total"] == pytest.approx(772.63, abs=0.01)
        assert data["headline_metrics"]["labor_hours"] == 7.0


# ═══════════════════════════════════════════════════════════════════════════
# Add-on quotes
# ═══════════════════════════════════════════════════════════════════════════


class TestAddonQuote:

    def test_quote(self):
        body = {"selections": [{"addon": WINDOW_WASHING}], "window_count": 30}
        r = client.post("/addons/quote", json=body)
        assert r.status_code == 200
        data = r.json()
        assert data["lines"][0]["subtotal"] == 180.0
        assert data["summary"]["monthly_total"] == 60.0

    def test_unoffered_frequency_is_400(self):
        body = {"selections": [{"addon": WINDOW_WASHING, "frequency": "monthly"}]}
        r = client.post("/addons/quote", json=body)
        assert r.status_code == 400
        assert "monthly" in r.json()["error"]

    def test_invalid_addon_is_422(self):
        body = {"selections": [{"addon": {**WINDOW_WASHING, "rate": 0}}]}
        assert client.post("/addons/quote", json=body).status_code == 422


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════


class TestHelpers:

    def test_deep_merge(self):
        base = {"a": {"b": 1, "c": 2}, "d": 3}
        assert _deep_merge(base, {"a": {"b": 5}, "e": 6}) == {"a": {"b": 5, "c": 2}, "d": 3, "e": 6}

    def test_deep_merge_replaces_non_dict(self):
        assert _deep_merge({"a": 1}, {"a": {"b": 2}}) == {"a": {"b": 2}}

    def test_build_configuration_without_overrides(self):
        assert _build_configuration({}) == PricingConfiguration()

    def test_build_configuration_merges(self):
        config = _build_configuration({"service_type_rates": {"floor": 0.3}})
        assert config.service_type_rates["floor"] == 0.3
        assert config.service_type_rates["carpet"] == 0.12


# ═══════════════════════════════════════════════════════════════════════════
# Narrative
# ═══════════════════════════════════════════════════════════════════════════


class TestNarrative:

    def test_sections(self, engine: PricingEngine, residential_request: PricingRequest):
        text = generate_pricing_narrative(residential_request, engine.calculate_pricing(residential_request))
        for heading in ("SERVICE SUMMARY", "PRICE BUILD-UP", "SERVICE ADJUSTMENTS", "LABOR ESTIMATE"):
            assert heading in text
        assert "Twice a Week" in text
        assert "Pet cleaning fee" in text
        assert "not added to the total" in text

    def test_no_adjustments(self, engine: PricingEngine):
        request = PricingRequest(facility_size=1000, service_specific_data={"cleaning_supplies_provided": True})
        text = generate_pricing_narrative(request, engine.calculate_pricing(request))
        assert "  None" in text
        assert "Complexity: standard" in text

    def test_comparison(self, engine: PricingEngine, residential_request: PricingRequest):
        quotes = compare_frequencies(engine, residential_request, ["one-time", "daily"])
        text = generate_comparison_narrative(quotes)
        assert "Lowest per-visit price: One Time" in text
        assert "Highest: Daily" in text

    def test_comparison_all_equal(self, engine: PricingEngine, residential_request: PricingRequest):
        quotes = compare_frequencies(engine, residential_request, ["one-time", "1x-month"])
        assert "All frequencies price the same" in generate_comparison_narrative(quotes)

    def test_comparison_empty(self):
        assert generate_comparison_narrative([]) == "No frequencies were compared."


# ═══════════════════════════════════════════════════════════════════════════
# Tool definitions
# ═══════════════════════════════════════════════════════════════════════════


class TestTools:

    def test_openai_tools(self):
        tools = get_openai_tools()
        names = [t["function"]["name"] for t in tools]
        assert names[0] == "get_pricing_context"
        assert "calculate_pricing" in names
        assert "quote_addons" in names
        for t in tools:
            assert t["type"] == "function"
            assert t["function"]["parameters"]["type"] == "object"

    def test_anthropic_tools_mirror_openai(self):
        openai_names = [t["function"]["name"] for t in get_openai_tools()]
        anthropic = get_anthropic_tools()
        assert [t["name"] for t in anthropic] == openai_names
        assert all("input_schema" in t for t in anthropic)

    def test_system_prompt(self):
        prompt = get_system_prompt("https://pricing.example.com")
        assert "https://pricing.example.com" in prompt
        assert "calculate_pricing" in prompt

    def test_tool_endpoints(self):
        for path in ("/tools/openai", "/tools/anthropic"):
            r = client.get(path)
            assert r.status_code == 200
            assert len(r.json()["tools"]) == len(get_openai_tools())
            assert "system_prompt" in r.json()
