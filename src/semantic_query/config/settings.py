"""Environment configuration and validation.

This module defines strongly-typed application settings loaded from environment variables
(optionally via a local `.env` file).
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    contract_path: str = Field(default="datacontract.yml", alias="CONTRACT_PATH")
    contract_cache_ttl_s: float = Field(default=3600.0, alias="CONTRACT_CACHE_TTL_S")
    resolution_policy: Literal["first", "specific"] = Field(
        default="first",
        alias="RESOLUTION_POLICY",
    )
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @field_validator("contract_cache_ttl_s")
    @classmethod
    def validate_ttl_positive(cls, value: float) -> float:
        """A non-positive TTL would re-read the contract file on every request."""

        if value <= 0:
            raise ValueError("CONTRACT_CACHE_TTL_S must be positive")
        return value

    @field_validator("resolution_policy", mode="before")
    @classmethod
    def normalize_policy_name(cls, value: object) -> object:
        return value.strip().lower() if isinstance(value, str) else value


def load_settings() -> Settings:
    """Load and validate settings from environment variables.

    Raises:
        RuntimeError: If the environment configuration is missing or invalid.
    """

    try:
        return Settings()
    except ValidationError as exc:
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc
