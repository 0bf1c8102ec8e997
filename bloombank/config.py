"""
Configuration settings for bloombank.

Uses Pydantic Settings for environment variable management with .env file support.
Every variable is prefixed with BLOOMBANK_ (e.g. BLOOMBANK_LOG_LEVEL=DEBUG).
"""
from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="BLOOMBANK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # Logging
    # ========================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Logging verbosity level",
    )
    log_file: str | None = Field(
        default=None,
        description="Log file path (None for stderr only)",
    )

    # ========================================
    # Input bounds (console prompts only)
    # ========================================
    min_minutes: int = Field(
        default=1,
        ge=1,
        description="Smallest estimated time accepted by the prompts",
    )
    max_minutes: int = Field(
        default=60,
        ge=1,
        description="Largest estimated time accepted by the prompts",
    )
    max_year: int = Field(
        default=2100,
        ge=1,
        description="Largest year accepted by the prompts (0 always means no year)",
    )
    min_choices: int = Field(
        default=2,
        ge=2,
        description="Fewest options / matching pairs a prompt asks for",
    )
    max_choices: int = Field(
        default=6,
        le=6,
        description="Most options / matching pairs a prompt asks for",
    )

    # ========================================
    # Console behaviour
    # ========================================
    preview_length: int = Field(
        default=50,
        ge=10,
        description="Characters of question text shown in listings",
    )
    clear_screen: bool = Field(
        default=True,
        description="Clear the terminal before each screen",
    )
    pause_after_action: bool = Field(
        default=True,
        description="Wait for Enter after each menu action",
    )

    @model_validator(mode="after")
    def _check_ranges(self) -> "Settings":
        if self.min_minutes > self.max_minutes:
            raise ValueError("min_minutes must not exceed max_minutes")
        if self.min_choices > self.max_choices:
            raise ValueError("min_choices must not exceed max_choices")
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
