"""
Configuration settings for Love CLI.

This module provides configuration management using Pydantic settings
with support for environment variables and .env files.
"""

from typing import Optional, Dict, Any
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from love_cli.core.client import DEFAULT_TIMEOUT_SECONDS


class LoveSettings(BaseSettings):
    """
    Main configuration settings for Love CLI.

    Settings are loaded from multiple sources in order of preference:
    1. Environment variables (prefixed with LOVE_)
    2. The .env file in the working directory
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="LOVE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API Configuration
    api_key: Optional[str] = Field(
        default=None,
        description="Love API key, generated from the Admin section"
    )

    base_url: Optional[str] = Field(
        default=None,
        description="API root including the 'api' part, e.g. https://cwrulove.appspot.com/api"
    )

    sender: Optional[str] = Field(
        default=None,
        description="Username love is sent from"
    )

    timeout: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        description="Request timeout in seconds",
        gt=0
    )

    default_limit: int = Field(
        default=20,
        description="Number of loves fetched by 'history' when no limit is given",
        ge=0,
        le=2000
    )

    # Logging Configuration
    log_level: str = Field(
        default="WARNING",
        description="Logging level"
    )

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: Optional[str]) -> Optional[str]:
        """Drop a trailing slash so paths can be appended directly."""
        if v is None:
            return v
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level '{v}'. Valid levels: {', '.join(sorted(valid_levels))}")
        return v_upper

    @property
    def is_configured(self) -> bool:
        """Check if the CLI can talk to a Love instance."""
        return bool(self.api_key) and bool(self.base_url)

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary, excluding sensitive data."""
        data = self.model_dump()
        # Mask sensitive data
        if data.get("api_key"):
            data["api_key"] = "***masked***"
        return data


def get_settings() -> LoveSettings:
    """Get the current Love CLI settings."""
    return LoveSettings()
