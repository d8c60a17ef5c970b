"""Janitorial Pricing — Streamlit dashboard.

Layout: sidebar inputs (settings + request) → main area with three tabs
(Breakdown | Frequencies | Proposal).
Design: metrics for headlines, proper tables, formulas in expanders,
one chart per question.

Run with:
    streamlit run src/janitorial_pricing/dashboard/app.py
"""

from __future__ import annotations

from typing import get_args

import pandas as pd
import plotly.graph_objects as go
import streamlit as st
import yaml

from janitorial_pricing.api.narrative import generate_comparison_narrative, generate_pricing_narrative
from janitorial_pricing.config import (
    SERVICE_FREQUENCIES,
    SERVICE_TYPES,
    CarpetDetails,
    CommercialDetails,
    FloorDetails,
    PricingRequest,
    WindowDetails,
)
from janitorial_pricing.config.app import get_app_settings
from janitorial_pricing.config.loader import resolve_pricing_configuration
from janitorial_pricing.engine import (
    PricingEngine,
    build_proposal_pricing_data,
    compare_frequencies,
)
from janitorial_pricing.formatting import format_currency, format_frequency, format_percentage

# ---------------------------------------------------------------------------
# Defaults from the active settings file
# ---------------------------------------------------------------------------
_DEF = resolve_pricing_configuration(get_app_settings().settings_file)
_DEF_REQ = PricingRequest()

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------
st.set_page_config(page_title="Janitorial Pricing", page_icon="🧹", layout="wide")

st.markdown("""
<style>
div[data-testid="stMetric"] {
    background: linear-gradient(135deg, rgba(30,34,44,0.95), rgba(22,26,35,0.98));
    border: 1px solid rgba(255,255,255,0.06);
    border-radius: 10px;
    padding: 14px 16px 12px;
}
div[data-testid="stMetric"] label {
    color: rgba(255,255,255,0.50) !important;
    font-size: 0.7rem !important;
    text-transform: uppercase;
    letter-spacing: 0.6px;
}
</style>
""", unsafe_allow_html=True)

st.title("Janitorial Pricing")
st.caption("Per-visit pricing for cleaning service proposals")

_CHART_LAYOUT = dict(
    height=320,
    margin=dict(l=20, r=20, t=30, b=20),
    showlegend=False,
    plot_bgcolor="rgba(0,0,0,0)",
    paper_bgcolor="rgba(0,0,0,0)",
    font=dict(size=11, color="rgba(255,255,255,0.7)"),
)


def _choices(model_cls, field: str) -> list[str]:
    """Allowed values of a Literal field on a service details model."""
    return list(get_args(model_cls.model_fields[field].annotation))


# ---------------------------------------------------------------------------
# SIDEBAR — Inputs
# ---------------------------------------------------------------------------
st.sidebar.header("Pricing Inputs")

with st.sidebar.expander("Service", expanded=True):
    service_type = st.selectbox(
        "Service type", SERVICE_TYPES, index=SERVICE_TYPES.index(_DEF_REQ.service_type),
        format_func=str.title,
    )
    service_frequency = st.selectbox(
        "Frequency", SERVICE_FREQUENCIES, index=SERVICE_FREQUENCIES.index("weekly"),
        format_func=format_frequency,
    )
    facility_size = st.number_input(
        "Facility size (sq ft)", 0.0, 1_000_000.0, 2500.0, 100.0,
        disabled=(service_type == "window"),
        help="Window cleaning prices by window count instead",
    )

details: dict = {}
with st.sidebar.expander("Site details", expanded=True):
    if service_type == "residential":
        details["bedrooms"] = st.number_input("Bedrooms", 0, 20, 3)
        details["bathrooms"] = st.number_input("Bathrooms", 0.0, 20.0, 2.0, 0.5)
        details["pets"] = st.checkbox("Pets in the home")
        details["cleaning_supplies_provided"] = st.checkbox("Client provides supplies", value=True)
    elif service_type == "commercial":
        details["employee_count"] = st.number_input("Employees", 0, 5000, 25)
        details["cleaning_schedule_preference"] = st.selectbox(
            "Schedule", _choices(CommercialDetails, "cleaning_schedule_preference"),
            index=1, format_func=format_frequency,
        )
    elif service_type == "carpet":
        details["carpet_age"] = st.selectbox("Carpet age", _choices(CarpetDetails, "carpet_age"))
        details["floor_condition"] = st.selectbox("Condition", _choices(CarpetDetails, "floor_condition"), index=1)
        details["pet_odors"] = st.checkbox("Pet odor treatment")
        details["protection_treatment"] = st.checkbox("Protection treatment")
    elif service_type == "window":
        details["window_count"] = st.number_input("Windows", 1, 5000, 20)
        details["story_height"] = st.selectbox(
            "Building height", _choices(WindowDetails, "story_height"), format_func=format_frequency,
        )
        details["exterior_access"] = st.selectbox(
            "Exterior access", _choices(WindowDetails, "exterior_access"), format_func=format_frequency,
        )
        details["screen_cleaning"] = st.checkbox("Screen cleaning")
        details["sill_cleaning"] = st.checkbox("Sill cleaning")
    elif service_type == "floor":
        details["floor_condition"] = st.selectbox("Condition", _choices(FloorDetails, "floor_condition"), index=1)
        details["furniture_moving"] = st.checkbox("Furniture moving")
        details["drying_time_preference"] = st.selectbox(
            "Drying", _choices(FloorDetails, "drying_time_preference"), format_func=format_frequency,
        )

with st.sidebar.expander("Business settings"):
    labor_rate = st.number_input("Labor rate $/h", 1.0, 500.0, _DEF.labor_rate, 1.0)
    overhead = st.number_input("Overhead %", 0.0, 200.0, _DEF.overhead_percentage, 1.0)
    margin = st.number_input("Margin %", 0.0, 200.0, _DEF.margin_percentage, 1.0)
    base_rate = st.number_input(
        f"{service_type.title()} base rate $",
        0.0, 100.0, float(_DEF.service_type_rates.get(service_type, 0.15)), 0.01,
        help="Per square foot, or per window for window cleaning",
    )

configuration = _DEF.with_updates(
    labor_rate=labor_rate,
    overhead_percentage=overhead,
    margin_percentage=margin,
    service_type_rates={**_DEF.service_type_rates, service_type: base_rate},
)
request = PricingRequest(
    service_type=service_type,
    facility_size=0.0 if service_type == "window" else facility_size,
    service_frequency=service_frequency,
    service_specific_data=details,
)

with st.sidebar.expander("Export settings"):
    st.download_button(
        "Download settings YAML",
        yaml.safe_dump({"settings": configuration.model_dump()}, sort_keys=False),
        file_name="pricing_settings.yaml",
        mime="text/yaml",
    )

# ---------------------------------------------------------------------------
# PRICE
# ---------------------------------------------------------------------------
engine = PricingEngine(configuration)
breakdown = engine.calculate_pricing(request)
proposal = build_proposal_pricing_data(breakdown, configuration, service_type)

c1, c2, c3, c4 = st.columns(4)
c1.metric("Price per visit", format_currency(breakdown.total))
c2.metric("Subtotal", format_currency(breakdown.subtotal))
c3.metric("Proposal range", f"{format_currency(proposal.price_range.low)} – {format_currency(proposal.price_range.high)}")
c4.metric("Labor estimate", f"{breakdown.labor_hours:g} h", help="Scheduling estimate, not included in the price")

breakdown_tab, frequency_tab, proposal_tab = st.tabs(["Breakdown", "Frequencies", "Proposal"])

# ---------------------------------------------------------------------------
# TAB — Breakdown
# ---------------------------------------------------------------------------
with breakdown_tab:
    frequency_effect = breakdown.base_price * breakdown.complexity_factor * (breakdown.frequency_multiplier - 1)
    complexity_effect = breakdown.base_price * (breakdown.complexity_factor - 1)

    steps = [
        ("Base price", breakdown.base_price, "absolute"),
        ("Complexity", complexity_effect, "relative"),
        ("Frequency", frequency_effect, "relative"),
        ("Service fees", breakdown.adjustments, "relative"),
        ("Subtotal", breakdown.subtotal, "total"),
        ("Overhead", breakdown.overhead_amount, "relative"),
        ("Margin", breakdown.margin_amount, "relative"),
        ("Total", breakdown.total, "total"),
    ]
    fig = go.Figure(go.Waterfall(
        x=[s[0] for s in steps],
        y=[s[1] if s[2] != "total" else 0 for s in steps],
        measure=[s[2] for s in steps],
        text=[format_currency(s[1]) for s in steps],
        textposition="outside",
        connector=dict(line=dict(color="rgba(255,255,255,0.2)")),
        increasing=dict(marker=dict(color="#6c5ce7")),
        decreasing=dict(marker=dict(color="#00b894")),
        totals=dict(marker=dict(color="#0984e3")),
    ))
    fig.update_layout(yaxis_title="$ per visit", **_CHART_LAYOUT)
    st.plotly_chart(fig, use_container_width=True)

    rows = [
        {"Line": "Base price", "Amount": format_currency(breakdown.base_price),
         "Detail": f"{breakdown.calculation_details.units:,.0f} {breakdown.calculation_details.unit_type} × "
                   f"{format_currency(breakdown.calculation_details.base_rate)}"},
        {"Line": "Complexity factor", "Amount": f"×{breakdown.complexity_factor:.2f}", "Detail": "Site difficulty"},
        {"Line": "Frequency multiplier", "Amount": f"×{breakdown.frequency_multiplier:.2f}",
         "Detail": format_frequency(service_frequency)},
    ]
    for name, amount in breakdown.service_adjustments.items():
        rows.append({"Line": format_frequency(name), "Amount": format_currency(amount), "Detail": "Service fee"})
    rows += [
        {"Line": "Subtotal", "Amount": format_currency(breakdown.subtotal), "Detail": ""},
        {"Line": "Overhead", "Amount": format_currency(breakdown.overhead_amount),
         "Detail": format_percentage(breakdown.overhead_percentage)},
        {"Line": "Margin", "Amount": format_currency(breakdown.margin_amount),
         "Detail": format_percentage(breakdown.margin_percentage)},
        {"Line": "Total", "Amount": format_currency(breakdown.total), "Detail": "Per visit"},
        {"Line": "Labor (not priced)", "Amount": format_currency(breakdown.labor_cost),
         "Detail": f"{breakdown.labor_hours:g} h × {format_currency(breakdown.labor_rate)}"},
    ]
    st.dataframe(pd.DataFrame(rows), use_container_width=True, hide_index=True)

    with st.expander("Show pricing formulas"):
        st.markdown("""
- **Base price** = size × base rate (windows × rate for window cleaning)
- **Subtotal** = base price × complexity × frequency multiplier + service fees
- **Total** = subtotal + overhead % + margin %
- **Labor** = hours × labor rate, reported for scheduling only
""")

# ---------------------------------------------------------------------------
# TAB — Frequencies
# ---------------------------------------------------------------------------
with frequency_tab:
    quotes = compare_frequencies(engine, request)
    df = pd.DataFrame([q.model_dump() for q in quotes])
    df["label"] = df["frequency"].map(format_frequency)

    fig_freq = go.Figure(go.Bar(
        x=df["label"],
        y=df["total"],
        text=[format_currency(t) for t in df["total"]],
        textposition="outside",
        marker_color=["#0984e3" if f == service_frequency else "#6c5ce7" for f in df["frequency"]],
    ))
    fig_freq.update_layout(yaxis_title="$ per visit", **_CHART_LAYOUT)
    st.plotly_chart(fig_freq, use_container_width=True)

    st.dataframe(
        df[["label", "frequency_multiplier", "subtotal", "total"]].rename(columns={
            "label": "Frequency",
            "frequency_multiplier": "Multiplier",
            "subtotal": "Subtotal $",
            "total": "Total $",
        }),
        use_container_width=True,
        hide_index=True,
    )
    st.text(generate_comparison_narrative(quotes))

# ---------------------------------------------------------------------------
# TAB — Proposal
# ---------------------------------------------------------------------------
with proposal_tab:
    p1, p2, p3 = st.columns(3)
    p1.metric("Display price", format_currency(proposal.display_price))
    p2.metric("Hours", f"{proposal.hours_estimate.min:g} – {proposal.hours_estimate.max:g}")
    p3.metric(
        "Production rate",
        f"{proposal.assumptions.production_rate.min:g} – {proposal.assumptions.production_rate.max:g}",
    )
    st.text(generate_pricing_narrative(request, breakdown))
    with st.expander("Proposal pricing JSON"):
        st.json(proposal.model_dump())
