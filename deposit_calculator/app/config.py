"""
App-wide settings.

Loads configuration from FD_* environment variables using pydantic-settings.
"""

from __future__ import annotations

from typing import Annotated, Any, Dict, List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

DEFAULT_CORS_ORIGINS = ["http://localhost:5173", "http://127.0.0.1:5173"]


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    # origins allowed to call /api/* from a browser, comma separated in the env
    cors_origins: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: list(DEFAULT_CORS_ORIGINS)
    )
    # seed for the floating-rate draw; None means nondeterministic
    random_seed: Optional[int] = None
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="FD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def split_origins(cls, value: Any) -> Any:
        if isinstance(value, str):
            origins = [origin.strip() for origin in value.split(",") if origin.strip()]
            return origins or list(DEFAULT_CORS_ORIGINS)
        return value

    @field_validator("random_seed", mode="before")
    @classmethod
    def blank_seed_is_unset(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level '{value}'")
        return level

    def flask_config(self) -> Dict[str, Any]:
        """Uppercase keys for app.config."""
        return {
            "TESTING": False,
            "CORS_ORIGINS": self.cors_origins,
            "RANDOM_SEED": self.random_seed,
            "LOG_LEVEL": self.log_level,
        }
