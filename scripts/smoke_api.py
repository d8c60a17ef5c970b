#!/usr/bin/env python3
"""Quick smoke test against a running pricing API.

Usage:
    python scripts/smoke_api.py [BASE_URL]
"""

import json
import sys

import requests

API_URL = sys.argv[1] if len(sys.argv) > 1 else "http://localhost:8000"

print("=" * 60)
print("Smoke testing Janitorial Pricing API")
print(f"Base URL: {API_URL}")
print("=" * 60)
print()

# 1. Health check
print("1. Health check...")
try:
    health = requests.get(f"{API_URL}/health", timeout=10)
    health.raise_for_status()
    print(f"   ✓ Status: {health.status_code}")
    print(f"   ✓ Response: {health.json()}")
except requests.RequestException as e:
    print(f"   ✗ Failed: {e}")
    sys.exit(1)
print()

# 2. Get context (what an LLM reads first)
print("2. Getting context (full)...")
try:
    context = requests.get(f"{API_URL}/context", params={"detail_level": "full"}, timeout=30)
    context.raise_for_status()
    ctx_data = context.json()
    print(f"   ✓ Service: {ctx_data['service_name']} {ctx_data['version']}")
    print(f"   ✓ Input sections: {len(ctx_data['input_sections'])}")
    print(f"   ✓ Endpoints: {len(ctx_data['endpoints'])}")
    print(f"   ✓ Size: ~{len(json.dumps(ctx_data)):,} chars")
except requests.RequestException as e:
    print(f"   ✗ Failed: {e}")
    sys.exit(1)
print()

# 3. Full pricing
print("3. Pricing a 2,500 sq ft home, twice a week, with pets...")
try:
    result = requests.post(
        f"{API_URL}/pricing/calculate",
        json={"request": {
            "service_type": "residential",
            "facility_size": 2500,
            "service_frequency": "2x-week",
            "service_specific_data": {"pets": True, "cleaning_supplies_provided": False},
        }},
        timeout=30,
    )
    result.raise_for_status()
    data = result.json()
    print(f"   ✓ Total: ${data['pricing']['total']:,.2f}")
    print(f"   ✓ Fees: {data['pricing']['service_adjustments']}")
    print(f"   ✓ Range: ${data['proposal_pricing']['price_range']['low']:,.2f}"
          f" – ${data['proposal_pricing']['price_range']['high']:,.2f}")
except requests.RequestException as e:
    print(f"   ✗ Failed: {e}")
    sys.exit(1)
print()

# 4. Quick estimate
print("4. Quick estimate, 10,000 sq ft commercial, weekly...")
try:
    estimate = requests.get(
        f"{API_URL}/pricing/estimate",
        params={"service_type": "commercial", "facility_size": 10000, "service_frequency": "weekly"},
        timeout=10,
    )
    estimate.raise_for_status()
    print(f"   ✓ Estimate: ${estimate.json()['estimate']:,.2f}")
except requests.RequestException as e:
    print(f"   ✗ Failed: {e}")
    sys.exit(1)
print()

# 5. Narrative
print("5. Narrative...")
try:
    narrative = requests.post(
        f"{API_URL}/pricing/narrative",
        json={"request": {"service_type": "commercial", "facility_size": 8000, "service_frequency": "weekly"}},
        timeout=30,
    )
    narrative.raise_for_status()
    print(f"   ✓ Headline: {narrative.json()['headline_metrics']}")
    print(f"   ✓ Preview: {narrative.json()['narrative'][:200]}...")
except requests.RequestException as e:
    print(f"   ✗ Failed: {e}")
    sys.exit(1)
print()

print("=" * 60)
print("All checks passed")
print("=" * 60)
