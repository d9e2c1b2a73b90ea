"""
Shared settings base.

All MemoryVault settings classes read the process environment and an
optional .env file in the working directory. Unknown keys are ignored so a
single .env can hold every prefix.

Dependencies: pydantic_settings
System role: Root of the configuration hierarchy
"""

from pydantic import Field
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Process-wide settings (no env prefix)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(default="development", description="development, staging, or production")
    debug: bool = Field(default=False, description="FastAPI debug mode")
    log_level: str = Field(default="INFO", description="Root logger level")
    cors_origins: list[str] = Field(
        default=["*"],
        description="Browser origins allowed to call the API (JSON list in env)",
    )
