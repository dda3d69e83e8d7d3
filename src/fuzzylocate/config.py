"""Configuration management for the fuzzy locator."""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Locator configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Matching thresholds
    fuzzy_threshold: float = Field(
        default=0.8, description="Normalized similarity needed for two lines to match fuzzily"
    )
    min_match_ratio: float = Field(
        default=0.8, description="Matched lines / max(matched span, query lines) gate"
    )
    line_hint_tolerance: int = Field(
        default=200, description="Max row distance between a candidate and the line hint"
    )

    # Logging
    log_dir: Path = Field(default=Path("./logs"))
    log_level: str = Field(default="INFO")
    log_format: Literal["json", "text", "both"] = Field(default="both")


def get_settings() -> Settings:
    """Get settings instance."""
    return Settings()


# Default singleton
settings = Settings()
