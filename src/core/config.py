"""Application configuration using Pydantic Settings."""

import re
from functools import lru_cache
from pathlib import Path

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Storage slot names become file names, so keep them to a safe character set.
STORAGE_KEY_RE = re.compile(r"[A-Za-z0-9_.-]+")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="Task Board")
    app_env: str = Field(default="development")
    debug: bool = Field(default=False)

    # Storage
    storage_backend: str = Field(
        default="file",
        description="Key-value backend for the state slot: 'file' or 'memory'",
    )
    storage_dir: Path = Field(
        default=Path(".taskboard"),
        description="Directory holding one JSON file per storage slot",
    )
    storage_key: str = Field(
        default="advancedTasks",
        description="Name of the slot the whole board state is saved under",
    )
    seed_on_empty: bool = Field(
        default=True,
        description="Start from the built-in demo tasks when nothing is stored",
    )

    # Logging
    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=False)

    @field_validator("storage_backend")
    @classmethod
    def validate_backend(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in ("file", "memory"):
            raise ValueError("storage_backend must be 'file' or 'memory'")
        return v

    @field_validator("storage_key")
    @classmethod
    def validate_storage_key(cls, v: str) -> str:
        if not STORAGE_KEY_RE.fullmatch(v):
            raise ValueError(
                "storage_key may only contain letters, digits, '_', '.' and '-'"
            )
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        return v.strip().upper()

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app_env == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
