"""Runtime configuration for the code server."""

from __future__ import annotations

from typing import List, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ServerSettings(BaseSettings):
    """Settings read from ``CODE_SERVER_*`` environment variables."""

    model_config = SettingsConfigDict(env_prefix="CODE_SERVER_")

    host: str = Field(default="127.0.0.1", description="Interface the HTTP server binds to")
    port: int = Field(default=5000, description="TCP port the HTTP server listens on")
    debug: bool = Field(default=False, description="Run Flask in debug mode")
    log_level: LogLevel = Field(default="INFO", description="Root logging level")
    cors_origins: List[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed by the CORS policy",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value
