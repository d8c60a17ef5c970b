"""Load pricing settings from YAML files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from janitorial_pricing.config.settings import DEFAULT_PRICING_CONFIGURATION, PricingConfiguration
from janitorial_pricing.exceptions import SettingsFileError

logger = logging.getLogger(__name__)


def load_pricing_configuration(path: str | Path) -> PricingConfiguration:
    """Read a YAML settings file into a ``PricingConfiguration``.

    Fields absent from the file keep their defaults. Raises
    ``SettingsFileError`` when the file is missing, is not valid YAML, or
    holds values the model rejects.
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise SettingsFileError(f"Cannot read pricing settings {path}: {e}") from e
    except yaml.YAMLError as e:
        raise SettingsFileError(f"Invalid YAML in pricing settings {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise SettingsFileError(f"Pricing settings {path} must be a mapping, got {type(data).__name__}")

    # Settings exported from the dashboard wrap the fields in a "settings" key
    if isinstance(data.get("settings"), dict):
        data = data["settings"]

    try:
        configuration = PricingConfiguration(**_known_fields(data))
    except ValidationError as e:
        raise SettingsFileError(f"Invalid pricing settings in {path}: {e}") from e

    logger.info("Loaded pricing settings from %s", path)
    return configuration


def resolve_pricing_configuration(path: str | Path | None) -> PricingConfiguration:
    """Load ``path`` if given, else return the built-in defaults."""
    if path is None:
        return DEFAULT_PRICING_CONFIGURATION
    return load_pricing_configuration(path)


def _known_fields(data: dict[str, Any]) -> dict[str, Any]:
    """Drop storage columns (id, user_id, timestamps) that are not settings."""
    fields = PricingConfiguration.model_fields
    return {k: v for k, v in data.items() if k in fields}
