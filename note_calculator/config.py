"""Calculator configuration.

Loads settings from ``NOTE_CALC_*`` environment variables (and an optional
``.env`` file) with type validation using pydantic-settings.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_prefix="NOTE_CALC_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    default_max_note: float = Field(
        default=20.0,
        description="Scale maximum used when the page field is empty or invalid",
        gt=0,
    )
    initial_rows: int = Field(
        default=2,
        description="Number of empty grade rows shown on a fresh page",
        ge=1,
        le=50,
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid:
            raise ValueError(f"log_level must be one of {valid}, got '{v}'")
        return upper


def get_settings(**overrides) -> Settings:
    """Create a Settings instance with optional overrides.

    Raises:
        ValidationError: If any value fails validation.
    """
    return Settings(**overrides)
