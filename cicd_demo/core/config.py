"""Application settings loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cicd_demo.core.constants import DEFAULT_HOST, DEFAULT_PORT, DEFAULT_VERSION
from cicd_demo.core.errors import ConfigurationError


class Settings(BaseSettings):
    """
    Configuration loaded from environment variables.

    Empty variables are treated as unset, so `PORT=` falls back to 8080 and
    `APP_VERSION=` falls back to the "dev" sentinel.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        populate_by_name=True,
        extra="ignore",
    )

    # ---------------------------------------------------------------------------
    # Listener
    # ---------------------------------------------------------------------------
    host: str = Field(default=DEFAULT_HOST, validation_alias="HOST")
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535, validation_alias="PORT")

    # ---------------------------------------------------------------------------
    # Build/deploy metadata
    # ---------------------------------------------------------------------------
    app_version: str = Field(default=DEFAULT_VERSION, validation_alias="APP_VERSION")
    app_env: str = Field(default="local", validation_alias="APP_ENV")

    @field_validator("host", "app_version", "app_env", mode="before")
    @classmethod
    def _strip_strings(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("app_version", mode="after")
    @classmethod
    def _default_blank_version(cls, value: str) -> str:
        return value or DEFAULT_VERSION

    @field_validator("port", mode="before")
    @classmethod
    def _strip_port(cls, value: object) -> object:
        if isinstance(value, str):
            stripped = value.strip()
            return stripped or DEFAULT_PORT
        return value


def load_settings() -> Settings:
    """Build settings from the environment, mapping validation failures to ConfigurationError."""
    try:
        return Settings()
    except ValidationError as exc:
        fields = ", ".join(str(err["loc"][0]) for err in exc.errors() if err.get("loc"))
        raise ConfigurationError(f"Invalid configuration: {fields or 'unknown field'}") from exc


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
