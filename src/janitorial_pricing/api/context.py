"""Context manifest generator — makes the pricing API self-describing.

Produces structured context at two detail levels:
  - ``compact``: parameter schemas + descriptions
  - ``full``:    adds the pricing model, formulas and interpretation guide

A proposal-writing assistant reads ``GET /context`` once and then knows what
it can configure, what to call, and how to read the breakdown.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

from janitorial_pricing import __version__
from janitorial_pricing.config import (
    AddonItem,
    CarpetDetails,
    CommercialDetails,
    FloorDetails,
    PricingConfiguration,
    PricingRequest,
    ResidentialDetails,
    WindowDetails,
)


# ═══════════════════════════════════════════════════════════════════════════
# Public response models
# ═══════════════════════════════════════════════════════════════════════════

class ParameterInfo(BaseModel):
    """One configurable parameter, machine-readable."""
    name: str
    type: str
    default: Any
    description: str
    constraints: dict[str, Any] = Field(default_factory=dict)


class SectionSchema(BaseModel):
    """Schema for one input section (settings, request, service details)."""
    section: str
    description: str
    parameters: list[ParameterInfo]


class OutputFieldInfo(BaseModel):
    """One output field, machine-readable."""
    name: str
    type: str
    description: str
    unit: str = ""


class EndpointInfo(BaseModel):
    """Description of one API endpoint."""
    method: str
    path: str
    description: str
    request_body: str = ""
    response: str = ""


class PricingContext(BaseModel):
    """Full self-describing context."""
    service_name: str
    version: str
    description: str
    pricing_model: str
    key_formulas: list[dict[str, str]]
    input_sections: list[SectionSchema]
    key_outputs: list[OutputFieldInfo]
    endpoints: list[EndpointInfo]
    interpretation_guide: str
    example_queries: list[dict[str, str]]


# ═══════════════════════════════════════════════════════════════════════════
# Schema extraction from Pydantic models
# ═══════════════════════════════════════════════════════════════════════════

def _extract_params(model_cls: type[BaseModel]) -> list[ParameterInfo]:
    """Extract parameter info from a Pydantic model class."""
    params: list[ParameterInfo] = []
    for name, field_info in model_cls.model_fields.items():
        constraints: dict[str, Any] = {}
        for attr in ("ge", "gt", "le", "lt", "min_length", "max_length", "pattern"):
            meta_val = _get_field_metadata(field_info, attr)
            if meta_val is not None:
                constraints[attr] = meta_val

        if field_info.default_factory is not None:
            default_val = field_info.default_factory()
        elif field_info.is_required():
            default_val = None
        else:
            default_val = field_info.default

        type_str = str(field_info.annotation) if field_info.annotation else "Any"
        type_str = type_str.replace("typing.", "").replace("<class '", "").replace("'>", "")

        params.append(ParameterInfo(
            name=name,
            type=type_str,
            default=default_val,
            description=field_info.description or "",
            constraints=constraints,
        ))
    return params


def _get_field_metadata(field_info: Any, attr: str) -> Any:
    """Extract constraint metadata from Pydantic field info."""
    for m in getattr(field_info, "metadata", []):
        value = getattr(m, attr, None)
        if value is not None:
            return value
    return None


# ═══════════════════════════════════════════════════════════════════════════
# Context builders
# ═══════════════════════════════════════════════════════════════════════════

_PRICING_MODEL = """
Janitorial Proposal Pricing

WHAT IT DOES:
Prices one cleaning service (residential, commercial, carpet, window or floor)
for a proposal. Given the service type, facility size, visit frequency and
service-specific details, it returns a per-visit price breakdown:
  - Base price: square feet × rate (windows × rate for window cleaning)
  - Complexity: difficulty loading (bedrooms, employee count, carpet age,
    story height, floor condition, ...), never below ×1.00
  - Frequency: multiplier per visit frequency (one-time, weekly, daily, ...)
  - Service fees: named flat or per-window fees (pets, after hours, screens, ...)
  - Overhead and margin: percentages of the subtotal
  - Labor: an hours estimate for scheduling, reported but NOT added to the total

SETTINGS:
Each business configures its labor rate, overhead %, margin %, base rates per
service type and frequency multipliers. Missing settings fall back to defaults;
a calculation never fails on incomplete settings.
"""

_INTERPRETATION_GUIDE = """
HOW TO READ A BREAKDOWN:

1. TOTAL is the client-facing price per visit:
   total = subtotal + overhead_amount + margin_amount

2. SUBTOTAL is the job price before loadings:
   subtotal = base_price × complexity_factor × frequency_multiplier + adjustments

3. SERVICE_ADJUSTMENTS names every fee that fired, e.g. {"pets": 25.0}.

4. LABOR_HOURS / LABOR_COST estimate crew time. They are informational and
   are not part of total. Use them to check the job is profitable at the
   quoted price.

5. PROPOSAL_PRICING gives the range shown to the client: ±10% around total,
   with hours from labor_hours up to 1.5× that.

COMMON ANALYSIS PATTERNS:
  - "What would weekly service cost instead?" → POST /pricing/compare
  - "Quick ballpark for 5,000 sq ft commercial" → GET /pricing/estimate
  - "Explain the price to the client" → POST /pricing/narrative
  - "Add quarterly window washing" → POST /addons/quote
"""

_KEY_FORMULAS = [
    {
        "name": "Base price",
        "formula": "facility_size × service_type_rates[service_type]  (window: window_count × rate)",
        "meaning": "Raw size of the job at the configured unit rate. Missing rate → 0.15.",
    },
    {
        "name": "Subtotal",
        "formula": "base_price × complexity_factor × frequency_multiplier + Σ service_adjustments",
        "meaning": "Job price before overhead and margin.",
    },
    {
        "name": "Total",
        "formula": "subtotal × (1 + overhead_percentage/100 + margin_percentage/100)",
        "meaning": "Client-facing price per visit. Labor cost is not included.",
    },
    {
        "name": "Labor hours",
        "formula": "ceil(size / sq_ft_per_hour) + condition bumps, minimum 1",
        "meaning": "Residential 400, commercial 600, carpet 300, floor 250 sq ft/h; windows 12/h.",
    },
    {
        "name": "Quick estimate",
        "formula": "size × rate × frequency_multiplier × (1 + overhead% + margin%)",
        "meaning": "Rough quote without complexity, fees or labor.",
    },
]

_EXAMPLE_QUERIES = [
    {
        "query": "Price a 2,500 sq ft home cleaned twice a week, with pets",
        "action": "POST /pricing/calculate with request.service_type='residential', facility_size=2500, "
                  "service_frequency='2x-week', service_specific_data={'pets': true}",
    },
    {
        "query": "What does a 150-window two-story job with screens cost?",
        "action": "POST /pricing/calculate with service_type='window', service_specific_data="
                  "{'window_count': 150, 'story_height': 'two', 'screen_cleaning': true}",
    },
    {
        "query": "Compare weekly against daily office cleaning",
        "action": "POST /pricing/compare with frequencies=['weekly', 'daily']",
    },
    {
        "query": "Ballpark a 10,000 sq ft commercial space",
        "action": "GET /pricing/estimate?service_type=commercial&facility_size=10000&service_frequency=weekly",
    },
    {
        "query": "Quote with a 30% margin instead of my saved settings",
        "action": "POST /pricing/calculate with settings={'margin_percentage': 30}",
    },
]

_KEY_OUTPUTS = [
    OutputFieldInfo(name="pricing.total", type="float", description="Client price per visit", unit="$"),
    OutputFieldInfo(name="pricing.subtotal", type="float", description="Price before overhead and margin", unit="$"),
    OutputFieldInfo(name="pricing.base_price", type="float", description="Units × base rate", unit="$"),
    OutputFieldInfo(name="pricing.adjustments", type="float", description="Sum of service fees", unit="$"),
    OutputFieldInfo(name="pricing.service_adjustments", type="dict[str, float]", description="Fee name → amount", unit="$"),
    OutputFieldInfo(name="pricing.complexity_factor", type="float", description="Difficulty multiplier ≥ 1.0", unit="ratio"),
    OutputFieldInfo(name="pricing.frequency_multiplier", type="float", description="Frequency multiplier applied", unit="ratio"),
    OutputFieldInfo(name="pricing.overhead_amount", type="float", description="Overhead loading", unit="$"),
    OutputFieldInfo(name="pricing.margin_amount", type="float", description="Margin loading", unit="$"),
    OutputFieldInfo(name="pricing.labor_hours", type="float", description="Estimated crew hours (not priced)", unit="hours"),
    OutputFieldInfo(name="pricing.labor_cost", type="float", description="labor_hours × labor_rate (not in total)", unit="$"),
    OutputFieldInfo(name="proposal_pricing.price_range", type="object", description="Low/high quote (±10%)", unit="$"),
]

_ENDPOINTS = [
    EndpointInfo(
        method="GET", path="/context",
        description="Returns this self-describing context. 'compact' for schemas only, 'full' adds the pricing model and guides.",
        response="PricingContext",
    ),
    EndpointInfo(
        method="GET", path="/schema",
        description="JSON schemas for PricingRequest and PricingConfiguration.",
        response="{'request': JSON Schema, 'settings': JSON Schema}",
    ),
    EndpointInfo(
        method="GET", path="/settings/defaults",
        description="The active pricing settings. Use as a starting point for overrides.",
        response="PricingConfiguration JSON",
    ),
    EndpointInfo(
        method="POST", path="/pricing/calculate",
        description="Full price breakdown for one request. Optional partial settings override the active settings.",
        request_body="{request, settings?, strict?}",
        response="{pricing: PricingBreakdown, proposal_pricing, input}",
    ),
    EndpointInfo(
        method="GET", path="/pricing/estimate",
        description="Quick estimate from service type, size and frequency only.",
        response="{estimate, input}",
    ),
    EndpointInfo(
        method="POST", path="/pricing/detailed",
        description="Simplified per-square-foot pricing with labor included in the total.",
        request_body="{request, settings?}",
        response="DetailedPricingResult",
    ),
    EndpointInfo(
        method="POST", path="/pricing/compare",
        description="Price the same request at several frequencies.",
        request_body="{request, settings?, frequencies?}",
        response="{quotes, comparison_narrative}",
    ),
    EndpointInfo(
        method="POST", path="/pricing/narrative",
        description="Plain-English explanation of the breakdown plus headline numbers.",
        request_body="{request, settings?}",
        response="{narrative, headline_metrics}",
    ),
    EndpointInfo(
        method="POST", path="/addons/quote",
        description="Price add-on selections and total them monthly and one-time.",
        request_body="{selections, facility_size?, window_count?}",
        response="{lines, summary}",
    ),
]

_INPUT_SECTIONS = [
    ("settings", PricingConfiguration, "Pricing settings — labor rate, overhead, margin, rates and multipliers"),
    ("request", PricingRequest, "Service request — type, size, frequency, service-specific data"),
    ("residential", ResidentialDetails, "service_specific_data keys for residential cleaning"),
    ("commercial", CommercialDetails, "service_specific_data keys for commercial cleaning"),
    ("carpet", CarpetDetails, "service_specific_data keys for carpet cleaning"),
    ("window", WindowDetails, "service_specific_data keys for window cleaning"),
    ("floor", FloorDetails, "service_specific_data keys for floor care"),
    ("addon", AddonItem, "Add-on catalog item"),
]


# ═══════════════════════════════════════════════════════════════════════════
# Public API
# ═══════════════════════════════════════════════════════════════════════════

def build_context(detail_level: Literal["compact", "full"] = "full") -> PricingContext:
    """Build the self-describing context manifest.

    Parameters
    ----------
    detail_level : "compact" | "full"
        compact — parameter schemas + descriptions only
        full    — includes pricing model, formulas, interpretation guide
    """
    sections: list[SectionSchema] = []
    for section_name, model_cls, desc in _INPUT_SECTIONS:
        sections.append(SectionSchema(
            section=section_name,
            description=desc,
            parameters=_extract_params(model_cls),
        ))

    full = detail_level == "full"
    return PricingContext(
        service_name="Janitorial Pricing API",
        version=__version__,
        description=(
            "Deterministic pricing for janitorial service proposals: per-visit price breakdowns, "
            "quick estimates, frequency comparisons, add-on quotes and proposal price ranges."
        ),
        pricing_model=_PRICING_MODEL.strip() if full else "",
        key_formulas=_KEY_FORMULAS if full else [],
        input_sections=sections,
        key_outputs=_KEY_OUTPUTS,
        endpoints=_ENDPOINTS,
        interpretation_guide=_INTERPRETATION_GUIDE.strip() if full else "",
        example_queries=_EXAMPLE_QUERIES if full else [],
    )


def get_pricing_schemas() -> dict[str, Any]:
    """Return JSON Schemas for the request and settings models."""
    return {
        "request": PricingRequest.model_json_schema(),
        "settings": PricingConfiguration.model_json_schema(),
    }
