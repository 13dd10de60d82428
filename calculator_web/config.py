"""Configuration module for environment-driven settings."""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=Path(__file__).resolve().parent.parent / ".env", env_file_encoding="utf-8", extra="ignore")

    # Core service metadata
    project_name: str = Field(default="Calculator Web App")
    environment: Literal["local", "dev", "prod"] = Field(default="local")
    api_prefix: str = Field(default="/api")

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8080)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO")

    # CORS
    cors_allow_origins: list[str] = Field(default_factory=lambda: ["*"])

    # Misc
    debug: bool = Field(default=False)

    @property
    def docs_enabled(self) -> bool:
        """Interactive API docs are exposed everywhere except production."""
        return self.environment != "prod"


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""
    return Settings()
