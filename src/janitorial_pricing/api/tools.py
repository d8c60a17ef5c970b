"""Pre-built tool/function definitions for LLM integration frameworks.

Generates tool schemas in OpenAI and Anthropic formats so a proposal-writing
assistant can call the pricing API.

Usage:
    from janitorial_pricing.api.tools import get_openai_tools, get_anthropic_tools
"""

from __future__ import annotations

from typing import Any

from janitorial_pricing.config.request import SERVICE_FREQUENCIES, SERVICE_TYPES

_REQUEST_DESCRIPTION = (
    "Service request. Example: "
    '{"service_type": "residential", "facility_size": 2500, "service_frequency": "weekly", '
    '"service_specific_data": {"pets": true, "bedrooms": 4}}'
)

_SETTINGS_DESCRIPTION = (
    "Optional partial pricing settings that override the active settings for this call. "
    'Example: {"margin_percentage": 30, "service_type_rates": {"commercial": 0.22}}'
)


def get_openai_tools() -> list[dict[str, Any]]:
    """Return tool definitions in OpenAI function-calling format.

    These can be passed directly to ``tools`` parameter in OpenAI chat completions.
    """
    return [
        {
            "type": "function",
            "function": {
                "name": "get_pricing_context",
                "description": (
                    "Get the full context of the Janitorial Pricing API. "
                    "Call this FIRST to learn how prices are built, which service details "
                    "matter for each service type, and how to read a breakdown."
                ),
                "parameters": {
                    "type": "object",
                    "properties": {
                        "detail_level": {
                            "type": "string",
                            "enum": ["compact", "full"],
                            "description": "compact = schemas only, full = pricing model + formulas + interpretation guide",
                        },
                    },
                    "required": [],
                },
            },
        },
        {
            "type": "function",
            "function": {
                "name": "get_default_settings",
                "description": (
                    "Get the active pricing settings (labor rate, overhead, margin, base rates, "
                    "frequency multipliers). Use as a starting point for overrides."
                ),
                "parameters": {"type": "object", "properties": {}, "required": []},
            },
        },
        {
            "type": "function",
            "function": {
                "name": "calculate_pricing",
                "description": (
                    "Price one cleaning service. Returns the full per-visit breakdown "
                    "(base price, complexity, frequency, fees, overhead, margin, labor estimate) "
                    "and the proposal price range."
                ),
                "parameters": {
                    "type": "object",
                    "properties": {
                        "request": {"type": "object", "description": _REQUEST_DESCRIPTION},
                        "settings": {"type": "object", "description": _SETTINGS_DESCRIPTION},
                        "strict": {
                            "type": "boolean",
                            "description": "Reject unknown values in service_specific_data instead of ignoring them",
                        },
                    },
                    "required": ["request"],
                },
            },
        },
        {
            "type": "function",
            "function": {
                "name": "quick_estimate",
                "description": (
                    "Rough price from service type, size and frequency only. "
                    "Use for ballpark answers before the site details are known."
                ),
                "parameters": {
                    "type": "object",
                    "properties": {
                        "service_type": {"type": "string", "enum": list(SERVICE_TYPES)},
                        "facility_size": {"type": "number", "description": "Square feet. Default 1000"},
                        "service_frequency": {"type": "string", "enum": list(SERVICE_FREQUENCIES)},
                    },
                    "required": ["service_type", "service_frequency"],
                },
            },
        },
        {
            "type": "function",
            "function": {
                "name": "compare_frequencies",
                "description": (
                    "Price the same service at several visit frequencies side by side. "
                    "Returns per-visit totals and a short comparison."
                ),
                "parameters": {
                    "type": "object",
                    "properties": {
                        "request": {"type": "object", "description": _REQUEST_DESCRIPTION},
                        "settings": {"type": "object", "description": _SETTINGS_DESCRIPTION},
                        "frequencies": {
                            "type": "array",
                            "items": {"type": "string", "enum": list(SERVICE_FREQUENCIES)},
                            "description": "Frequencies to compare. Defaults to all of them.",
                        },
                    },
                    "required": ["request"],
                },
            },
        },
        {
            "type": "function",
            "function": {
                "name": "get_pricing_narrative",
                "description": (
                    "Price a service and get ONLY the plain-English explanation plus headline numbers. "
                    "Ideal for writing the pricing rationale of a proposal."
                ),
                "parameters": {
                    "type": "object",
                    "properties": {
                        "request": {"type": "object", "description": _REQUEST_DESCRIPTION},
                        "settings": {"type": "object", "description": _SETTINGS_DESCRIPTION},
                    },
                    "required": ["request"],
                },
            },
        },
        {
            "type": "function",
            "function": {
                "name": "quote_addons",
                "description": (
                    "Price add-on services (e.g. window washing, floor waxing) and total them "
                    "as a monthly amount and a one-time amount."
                ),
                "parameters": {
                    "type": "object",
                    "properties": {
                        "selections": {
                            "type": "array",
                            "items": {
                                "type": "object",
                                "properties": {
                                    "addon": {"type": "object", "description": "Add-on catalog item"},
                                    "quantity": {"type": "number", "description": "Units to price; omit to use the item's default source"},
                                    "frequency": {"type": "string", "enum": ["one_time", "monthly", "quarterly", "annual"]},
                                },
                                "required": ["addon"],
                            },
                        },
                        "facility_size": {"type": "number", "description": "Square feet, for sqft-based quantities"},
                        "window_count": {"type": "number", "description": "Windows, for pane-based quantities"},
                    },
                    "required": ["selections"],
                },
            },
        },
    ]


def get_anthropic_tools() -> list[dict[str, Any]]:
    """Return tool definitions in Anthropic tool-use format.

    These can be passed directly to ``tools`` parameter in Anthropic messages API.
    """
    anthropic_tools: list[dict[str, Any]] = []

    for tool in get_openai_tools():
        func = tool["function"]
        anthropic_tools.append({
            "name": func["name"],
            "description": func["description"],
            "input_schema": func["parameters"],
        })

    return anthropic_tools


def get_system_prompt(base_url: str = "http://localhost:8000") -> str:
    """System prompt for an LLM that writes janitorial proposals with this API."""
    return f"""You are an AI assistant that prices janitorial services for proposals.

WHAT THE PRICING API DOES:
It prices one cleaning service (residential, commercial, carpet, window or floor care)
from the facility size, visit frequency and site details, using the business's own
labor rate, overhead, margin, base rates and frequency multipliers.

YOUR CAPABILITIES:
1. get_pricing_context — Read the full pricing documentation (call this first if unsure)
2. get_default_settings — See the business's active pricing settings
3. calculate_pricing — Full per-visit breakdown plus the proposal price range
4. quick_estimate — Ballpark price from type, size and frequency
5. compare_frequencies — Price the same job at several visit frequencies
6. get_pricing_narrative — Plain-English explanation of a price
7. quote_addons — Price extra services and total them monthly

API BASE URL: {base_url}

WORKFLOW:
1. Collect the service type, facility size and visit frequency
2. Ask for the site details that change the price (pets, bedrooms, employee count,
   carpet age, window count and story height, floor condition)
3. Call calculate_pricing and quote the proposal price range to the client
4. Use get_pricing_narrative to explain what drives the price

KEY NUMBERS TO WATCH:
- total: price per visit (overhead and margin included)
- service_adjustments: the named fees that apply
- labor_hours: crew time estimate, NOT included in the total

IMPORTANT: Never invent prices. Every number you quote must come from the API.
"""
