"""Configuration management for uiseek using pydantic-settings.

Supports environment variables (``UISEEK_`` prefix), ``.env`` files and type
validation. Scroll-search defaults live here so that test suites can tune
them without touching code.
"""

import os
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class UiseekSettings(BaseSettings):
    """Main configuration settings for uiseek."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="UISEEK_",
        case_sensitive=False,
        extra="forbid",
    )

    # Scroll settings
    max_scrolls: int = Field(100, ge=0, description="Upper bound on scroll steps per direction")
    per_scroll_timeout_millis: int = Field(
        1000, ge=0, description="Poll budget for the item after each scroll step"
    )
    axis: Literal["VERTICAL", "HORIZONTAL"] = Field(
        "VERTICAL", description="Axis searched when no direction is given"
    )
    change_timeout_millis: int = Field(
        500, ge=0, description="How long a dynamic sentinel may take to change after a step"
    )

    # Polling settings
    poll_interval_millis: int = Field(100, gt=0, description="Wait between poll attempts")
    default_timeout_millis: int = Field(
        10000, ge=0, description="Default timeout for UiDriver.on and the check helpers"
    )

    # Logging settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        "INFO", description="Log level"
    )
    log_file: Path | None = Field(None, description="Optional log file path")
    structured_logging: bool = Field(False, description="Render logs as JSON")
    debug_mode: bool = Field(False, description="Enable debug logging")


class TestSettings(UiseekSettings):
    """Test-specific settings."""

    model_config = SettingsConfigDict(env_file=".env.test", env_prefix="UISEEK_", extra="forbid")

    per_scroll_timeout_millis: int = 0
    poll_interval_millis: int = 1
    default_timeout_millis: int = 0
    change_timeout_millis: int = 0


# Singleton instance
_settings: UiseekSettings | None = None


def get_settings(env: str | None = None) -> UiseekSettings:
    """Get the singleton settings instance.

    Args:
        env: Environment name ('test' or None to auto-detect from UISEEK_ENV)

    Returns:
        UiseekSettings instance
    """
    global _settings

    if _settings is None:
        env_name = env or os.getenv("UISEEK_ENV", "default")
        if env_name == "test":
            _settings = TestSettings()
        else:
            _settings = UiseekSettings()

    return _settings


def reset_settings() -> None:
    """Reset the settings singleton (mainly for testing)."""
    global _settings
    _settings = None
