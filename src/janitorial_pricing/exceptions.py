"""Exception types raised outside of the pricing arithmetic itself.

Calculations never raise; these cover construction, settings loading and
add-on selection.
"""

from __future__ import annotations


class PricingError(Exception):
    """Base class for all pricing errors."""


class ConfigurationRequiredError(PricingError, ValueError):
    """A pricing engine was built without a configuration."""

    def __init__(self, message: str = "PricingConfiguration is required") -> None:
        super().__init__(message)


class SettingsFileError(PricingError):
    """A pricing settings file could not be read or parsed."""


class AddonFrequencyError(PricingError, ValueError):
    """An add-on was priced at a frequency it does not offer."""
