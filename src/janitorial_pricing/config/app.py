"""Service settings loaded from environment variables.

Every field can be set as ``PRICING_<FIELD>`` (e.g. ``PRICING_PORT=9000``)
or in a ``.env`` file in the working directory.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppSettings(BaseSettings):
    """Settings for the HTTP API and dashboard processes."""

    # ── App ──────────────────────────────────────────────
    app_name: str = "Janitorial Pricing API"
    host: str = "0.0.0.0"
    port: int = Field(default=8000, ge=1, le=65535)
    reload: bool = False
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    # ── Pricing ──────────────────────────────────────────
    settings_file: Path | None = Field(
        default=None,
        description="YAML file with the active PricingConfiguration. "
                    "Built-in defaults are used when unset.",
    )

    # ── Logging ──────────────────────────────────────────
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="PRICING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_app_settings() -> AppSettings:
    """Return cached service settings."""
    return AppSettings()


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for the service processes."""
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
