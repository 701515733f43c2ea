"""Settings with pydantic-settings.

Values come from PROJECT_STORE_* environment variables or a local .env file.

Usage:
    from project_store.config import get_settings

    settings = get_settings()
    settings.data_file
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Project store settings.

    All fields are optional with sensible defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="PROJECT_STORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Storage ===

    data_file: Path = Field(
        default=Path("projects.json"),
        description="JSON file holding the project collection",
    )
    atomic_writes: bool = Field(
        default=True,
        description="Write to a temp file and rename instead of truncating in place",
    )

    # === Logging ===

    service_name: str = Field(
        default="project-store",
        description="Service name for structured logging",
    )
    log_format: Literal["json", "console"] = Field(
        default="console",
        description="Log output format",
    )
    log_level: str = Field(
        default="WARNING",
        description="Log level (DEBUG, INFO, WARNING, ERROR)",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_v = v.upper()
        if upper_v not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return upper_v


@lru_cache
def get_settings() -> Settings:
    return Settings()
