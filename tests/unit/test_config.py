"""Tests for configuration defaults and env overrides."""

from __future__ import annotations

from natid.core.config import APIConfig, AppSettings, ClockConfig, ValidationConfig


def test_default_settings():
    settings = AppSettings()
    assert settings.environment == "dev"
    assert settings.log_level == "INFO"
    assert settings.validation.future_tolerance_hours == 24
    assert settings.clock.fixed_now is None


def test_api_config_defaults():
    config = APIConfig()
    assert config.enabled_validators == []


def test_validation_env_override(monkeypatch):
    monkeypatch.setenv("NATID_VALIDATION_FUTURE_TOLERANCE_HOURS", "0")
    assert ValidationConfig().future_tolerance_hours == 0


def test_clock_env_override(monkeypatch):
    monkeypatch.setenv("NATID_CLOCK_FIXED_NOW", "2024-06-01T12:00:00+00:00")
    assert ClockConfig().fixed_now.year == 2024


def test_app_settings_reads_sub_config_env_at_construction(monkeypatch):
    monkeypatch.setenv("NATID_CLOCK_FIXED_NOW", "2024-06-01T12:00:00+00:00")
    monkeypatch.setenv("NATID_VALIDATION_FUTURE_TOLERANCE_HOURS", "0")
    settings = AppSettings()
    assert settings.clock.fixed_now.year == 2024
    assert settings.validation.future_tolerance_hours == 0
