"""FastAPI server — LLM-accessible API for janitorial proposal pricing.

Run with:
    uvicorn janitorial_pricing.api.server:app --reload --port 8000

Or:
    python -m janitorial_pricing.api.server

Endpoints:
    GET  /context             — self-describing manifest (pricing model + schemas)
    GET  /schema              — JSON Schema for PricingRequest and PricingConfiguration
    GET  /settings/defaults   — the active pricing settings
    POST /pricing/calculate   — full price breakdown + proposal price range
    GET  /pricing/estimate    — quick estimate from type, size and frequency
    POST /pricing/detailed    — simplified per-square-foot pricing with labor
    POST /pricing/compare     — price one request at several frequencies
    POST /pricing/narrative   — plain-English explanation + headline numbers
    POST /addons/quote        — price add-on selections
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Literal

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, ValidationError

from janitorial_pricing import __version__
from janitorial_pricing.config.addon import AddonFrequency, AddonItem
from janitorial_pricing.config.app import configure_logging, get_app_settings
from janitorial_pricing.config.loader import resolve_pricing_configuration
from janitorial_pricing.config.request import PricingRequest
from janitorial_pricing.config.service_details import validate_service_details
from janitorial_pricing.config.settings import PricingConfiguration
from janitorial_pricing.engine.addons import price_addon, summarize_addons
from janitorial_pricing.engine.comparison import compare_frequencies
from janitorial_pricing.engine.legacy import calculate_detailed_pricing
from janitorial_pricing.engine.pricing_engine import PricingEngine
from janitorial_pricing.engine.proposal import build_proposal_pricing_data
from janitorial_pricing.exceptions import PricingError
from janitorial_pricing.models.results import (
    AddonLine,
    AddonSummary,
    DetailedPricingResult,
    FrequencyQuote,
    PricingBreakdown,
    ProposalPricingData,
)
from janitorial_pricing.api.context import build_context, get_pricing_schemas
from janitorial_pricing.api.narrative import generate_comparison_narrative, generate_pricing_narrative
from janitorial_pricing.api.tools import get_anthropic_tools, get_openai_tools, get_system_prompt

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title="Janitorial Pricing API",
    version=__version__,
    description=(
        "LLM-accessible pricing for janitorial service proposals. Price a service, "
        "get a quick estimate, compare visit frequencies, quote add-ons and get "
        "plain-English explanations. Start by calling GET /context."
    ),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_app_settings().cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(PricingError)
async def pricing_error_handler(request: Request, exc: PricingError) -> JSONResponse:
    logger.warning("Pricing error on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=400, content={"error": str(exc)})


# ═══════════════════════════════════════════════════════════════════════════
# Request / response models
# ═══════════════════════════════════════════════════════════════════════════

class CalculateRequest(BaseModel):
    """Request body for /pricing/calculate, /pricing/detailed and /pricing/narrative."""
    request: PricingRequest = Field(default_factory=PricingRequest)
    settings: dict[str, Any] = Field(
        default_factory=dict,
        description="Partial PricingConfiguration merged onto the active settings. "
                    "Example: {'margin_percentage': 30, 'frequency_multipliers': {'weekly': 1.15}}",
    )
    strict: bool = Field(
        default=False,
        description="Validate service_specific_data against the service type's details model",
    )


class CompareRequest(CalculateRequest):
    """Request body for /pricing/compare."""
    frequencies: list[str] | None = Field(
        default=None,
        description="Frequencies to price. Defaults to every standard frequency.",
    )


class AddonSelection(BaseModel):
    """One add-on chosen for a proposal."""
    addon: AddonItem
    quantity: float | None = Field(default=None, ge=0, description="Units; omit to use the item's quantity source")
    frequency: AddonFrequency | None = Field(default=None, description="Billing frequency; omit for the item default")


class AddonQuoteRequest(BaseModel):
    """Request body for /addons/quote."""
    selections: list[AddonSelection] = Field(default_factory=list)
    facility_size: float = Field(default=0.0, ge=0, description="Square feet for sqft-sourced quantities")
    window_count: float = Field(default=0.0, ge=0, description="Windows for pane-sourced quantities")


class CalculateResponse(BaseModel):
    """Response from /pricing/calculate."""
    pricing: PricingBreakdown
    proposal_pricing: ProposalPricingData
    input: PricingRequest


class CompareResponse(BaseModel):
    """Response from /pricing/compare."""
    quotes: list[FrequencyQuote]
    comparison_narrative: str


class AddonQuoteResponse(BaseModel):
    """Response from /addons/quote."""
    lines: list[AddonLine]
    summary: AddonSummary


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

@lru_cache()
def get_active_configuration() -> PricingConfiguration:
    """Settings file named by PRICING_SETTINGS_FILE, or the built-in defaults."""
    return resolve_pricing_configuration(get_app_settings().settings_file)


def _build_configuration(overrides: dict[str, Any]) -> PricingConfiguration:
    """Merge partial overrides onto the active configuration."""
    active = get_active_configuration()
    if not overrides:
        return active
    merged = _deep_merge(active.model_dump(), overrides)
    try:
        return PricingConfiguration(**merged)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=_errors(e)) from e


def _deep_merge(base: dict, overrides: dict) -> dict:
    """Recursively merge overrides into base dict."""
    for key, val in overrides.items():
        if key in base and isinstance(base[key], dict) and isinstance(val, dict):
            _deep_merge(base[key], val)
        else:
            base[key] = val
    return base


def _check_service_details(req: CalculateRequest) -> None:
    if not req.strict:
        return
    try:
        validate_service_details(req.request.service_type, req.request.service_specific_data)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=_errors(e)) from e


def _errors(e: ValidationError) -> list[dict[str, Any]]:
    return e.errors(include_url=False, include_context=False)


def _price(req: CalculateRequest) -> tuple[PricingConfiguration, PricingBreakdown]:
    _check_service_details(req)
    configuration = _build_configuration(req.settings)
    breakdown = PricingEngine(configuration).calculate_pricing(req.request)
    logger.info(
        "Priced %s %s sq ft %s: total %.2f",
        req.request.service_type, req.request.facility_size, req.request.service_frequency, breakdown.total,
    )
    return configuration, breakdown


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    """Health check for deployment platforms."""
    return {"status": "ok"}


@app.get("/")
def root():
    """API root — returns a welcome message and pointer to /context."""
    return {
        "name": "Janitorial Pricing API",
        "version": __version__,
        "start_here": "GET /context?detail_level=full",
        "docs": "GET /docs (interactive Swagger UI)",
        "description": "LLM-accessible pricing for janitorial service proposals.",
    }


@app.get("/context")
def get_context(
    detail_level: Literal["compact", "full"] = Query(
        default="full",
        description="'compact' for schemas only, 'full' for pricing model + formulas + guide",
    ),
):
    """Self-describing context manifest for LLM consumption.

    Call this FIRST to understand how prices are built, what inputs are
    available, and how to read a breakdown.
    """
    return build_context(detail_level)


@app.get("/schema")
def get_schema():
    """JSON Schemas for PricingRequest and PricingConfiguration."""
    return get_pricing_schemas()


@app.get("/settings/defaults")
def get_defaults():
    """The active pricing settings as JSON. Use as a starting point for overrides."""
    return get_active_configuration().model_dump()


@app.post("/pricing/calculate", response_model=CalculateResponse)
def pricing_calculate(req: CalculateRequest):
    """Full price breakdown for one service request.

    Send a request plus optional partial settings. Example minimal request:
    ```json
    {"request": {"service_type": "residential", "facility_size": 2500, "service_frequency": "weekly"}}
    ```
    """
    configuration, breakdown = _price(req)
    return CalculateResponse(
        pricing=breakdown,
        proposal_pricing=build_proposal_pricing_data(breakdown, configuration, req.request.service_type),
        input=req.request,
    )


@app.get("/pricing/estimate")
def pricing_estimate(
    service_type: str | None = Query(default=None, description="residential, commercial, carpet, window or floor"),
    service_frequency: str | None = Query(default=None, description="Frequency key, e.g. 'weekly'"),
    facility_size: float = Query(default=1000, ge=0, description="Square feet"),
):
    """Quick estimate without complexity, fees or labor."""
    if not service_type or not service_frequency:
        raise HTTPException(status_code=400, detail="service_type and service_frequency are required")

    estimate = PricingEngine(get_active_configuration()).get_quick_estimate(
        service_type, facility_size, service_frequency,
    )
    return {
        "estimate": estimate,
        "input": {
            "service_type": service_type,
            "facility_size": facility_size,
            "service_frequency": service_frequency,
        },
    }


@app.post("/pricing/detailed", response_model=DetailedPricingResult)
def pricing_detailed(req: CalculateRequest):
    """Simplified per-square-foot pricing that includes labor in the total."""
    _check_service_details(req)
    configuration = _build_configuration(req.settings)
    return calculate_detailed_pricing(
        req.request.service_type,
        req.request.facility_size,
        req.request.service_frequency,
        configuration,
    )


@app.post("/pricing/compare", response_model=CompareResponse)
def pricing_compare(req: CompareRequest):
    """Price the same request at several visit frequencies."""
    _check_service_details(req)
    engine = PricingEngine(_build_configuration(req.settings))
    quotes = compare_frequencies(engine, req.request, req.frequencies)
    return CompareResponse(
        quotes=quotes,
        comparison_narrative=generate_comparison_narrative(quotes),
    )


@app.post("/pricing/narrative")
def pricing_narrative(req: CalculateRequest):
    """Price a request and return ONLY the plain-English narrative.

    Ideal for LLMs writing the pricing rationale of a proposal without
    parsing the raw breakdown.
    """
    configuration, breakdown = _price(req)
    proposal = build_proposal_pricing_data(breakdown, configuration, req.request.service_type)
    return {
        "narrative": generate_pricing_narrative(req.request, breakdown),
        "headline_metrics": {
            "total": breakdown.total,
            "subtotal": breakdown.subtotal,
            "price_range_low": proposal.price_range.low,
            "price_range_high": proposal.price_range.high,
            "labor_hours": breakdown.labor_hours,
            "labor_cost": breakdown.labor_cost,
        },
    }


@app.post("/addons/quote", response_model=AddonQuoteResponse)
def addons_quote(req: AddonQuoteRequest):
    """Price add-on selections and total them monthly and one-time."""
    lines = [
        price_addon(
            sel.addon,
            quantity=sel.quantity,
            frequency=sel.frequency,
            facility_size=req.facility_size,
            window_count=req.window_count,
        )
        for sel in req.selections
    ]
    return AddonQuoteResponse(lines=lines, summary=summarize_addons(lines))


@app.get("/tools/openai")
def get_openai_tool_definitions():
    """Pre-built tool/function definitions in OpenAI function-calling format."""
    return {
        "tools": get_openai_tools(),
        "system_prompt": get_system_prompt(),
        "usage": (
            "1. Add these tools to your OpenAI chat completion request\n"
            "2. Use the system_prompt as your system message\n"
            "3. The LLM will call these functions as needed\n"
            "4. Map function calls to the corresponding API endpoints"
        ),
    }


@app.get("/tools/anthropic")
def get_anthropic_tool_definitions():
    """Pre-built tool definitions in Anthropic tool-use format."""
    return {
        "tools": get_anthropic_tools(),
        "system_prompt": get_system_prompt(),
        "usage": (
            "1. Add these tools to your Anthropic messages API request\n"
            "2. Use the system_prompt as your system message\n"
            "3. The LLM will use tool_use blocks to call these functions\n"
            "4. Map tool calls to the corresponding API endpoints"
        ),
    }


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn

    settings = get_app_settings()
    configure_logging(settings.log_level)
    logger.info("Starting %s on %s:%d", settings.app_name, settings.host, settings.port)
    uvicorn.run(
        "janitorial_pricing.api.server:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
    )


if __name__ == "__main__":
    main()
