"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class ValidationConfig(BaseSettings):
    """Validation behaviour shared by date-bearing validators."""

    model_config = {"env_prefix": "NATID_VALIDATION_"}

    # Dates up to now + tolerance still count as "in the past" (timezone skew).
    future_tolerance_hours: int = 24


class ClockConfig(BaseSettings):
    """Time source configuration."""

    model_config = {"env_prefix": "NATID_CLOCK_"}

    fixed_now: datetime | None = None  # Pin "now" for reproducible runs


class APIConfig(BaseSettings):
    """HTTP surface configuration."""

    model_config = {"env_prefix": "NATID_API_"}

    title: str = "natid Identifier Validation Service"
    enabled_validators: list[str] = []  # empty = all registered


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "NATID_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"

    # Sub-configs read the environment when AppSettings is built, not at import.
    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    clock: ClockConfig = Field(default_factory=ClockConfig)
    api: APIConfig = Field(default_factory=APIConfig)
