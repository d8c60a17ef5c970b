"""Janitorial proposal pricing.

Deterministic price breakdowns for cleaning-service proposals: base price,
complexity, frequency, service fees, labor estimate, overhead and margin.
"""

__version__ = "1.0.0"
