"""Configuration models — pricing settings, requests and add-ons."""

from janitorial_pricing.config.settings import (
    DEFAULT_PRICING_CONFIGURATION,
    PricingConfiguration,
)
from janitorial_pricing.config.request import (
    SERVICE_FREQUENCIES,
    SERVICE_TYPES,
    PricingRequest,
    ServiceFrequency,
    ServiceType,
)
from janitorial_pricing.config.service_details import (
    CarpetDetails,
    CommercialDetails,
    FloorDetails,
    ResidentialDetails,
    WindowDetails,
    validate_service_details,
)
from janitorial_pricing.config.addon import AddonItem

__all__ = [
    "DEFAULT_PRICING_CONFIGURATION",
    "PricingConfiguration",
    "PricingRequest",
    "ServiceType",
    "ServiceFrequency",
    "SERVICE_TYPES",
    "SERVICE_FREQUENCIES",
    "ResidentialDetails",
    "CommercialDetails",
    "CarpetDetails",
    "WindowDetails",
    "FloorDetails",
    "validate_service_details",
    "AddonItem",
]
