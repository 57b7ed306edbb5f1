"""Env var config loading with pydantic-settings."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from cspguard.policy.parser import DuplicatePolicy

_PRESETS_PATH = Path(__file__).parent / "presets.yaml"


class CSPSettings(BaseSettings):
    """cspguard configuration, overridable with CSPGUARD_* env vars."""

    model_config = SettingsConfigDict(
        env_prefix="CSPGUARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "info"
    log_json: bool = True

    # "error" rejects a policy that repeats a directive, "ignore" keeps the first
    duplicate_directives: DuplicatePolicy = DuplicatePolicy.error

    # Policy presets
    header_preset: str = "balanced"
    presets_file: str = str(_PRESETS_PATH)

    # Violation report endpoint
    report_path: str = "/csp-report"
    max_report_bytes: int = 64 * 1024


_settings: CSPSettings | None = None


def get_settings() -> CSPSettings:
    """Get or create the singleton settings instance."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def load_settings() -> CSPSettings:
    """Load settings from env vars (env vars override model defaults)."""
    global _settings
    _settings = CSPSettings()
    return _settings
