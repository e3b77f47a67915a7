"""Process-wide configuration.

Settings are read from ``STOCKVIEW_*`` environment variables once at startup
and treated as read-only afterwards. The service base URL resolves as:

1. Explicit value passed by the caller
2. ``STOCKVIEW_API_BASE_URL`` environment variable
3. Default for the environment named by ``STOCKVIEW_ENV``

Production has no default base URL; it must be configured explicitly.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any

import pydantic
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .enums import Environment
from .exceptions import ConfigurationError

ENV_PREFIX = "STOCKVIEW_"
ENV_BASE_URL = f"{ENV_PREFIX}API_BASE_URL"
ENV_ENVIRONMENT = f"{ENV_PREFIX}ENV"
ENV_REQUEST_TIMEOUT = f"{ENV_PREFIX}REQUEST_TIMEOUT"

DEFAULT_BASE_URLS: dict[Environment, str] = {
    Environment.DEVELOPMENT: "http://localhost:8000/api",
    Environment.TEST: "http://localhost:8000/api",
}

DEFAULT_REQUEST_TIMEOUT = 30.0
DEFAULT_SEARCH_DEBOUNCE_SECONDS = 0.3
DEFAULT_MIN_QUERY_LENGTH = 2
DEFAULT_SYMBOL = "IBM"
DEFAULT_SERIES_ERROR_MESSAGE = "Failed to load stock data"


def default_base_url(environment: Environment) -> str:
    """Base URL used when none is configured.

    Raises:
        ConfigurationError: If the environment has no default
    """
    url = DEFAULT_BASE_URLS.get(environment)
    if url is None:
        raise ConfigurationError(
            f"No default API base URL for {environment.value}; set {ENV_BASE_URL}"
        )
    return url


class Settings(BaseSettings):
    """Immutable runtime settings, overridable per field via ``STOCKVIEW_<FIELD>``."""

    api_base_url: str = Field("", min_length=1)
    environment: Environment = Field(Environment.DEVELOPMENT, validation_alias=ENV_ENVIRONMENT)
    request_timeout: float = Field(DEFAULT_REQUEST_TIMEOUT, gt=0)
    search_debounce_seconds: float = Field(DEFAULT_SEARCH_DEBOUNCE_SECONDS, ge=0)
    min_query_length: int = Field(DEFAULT_MIN_QUERY_LENGTH, ge=0)
    default_symbol: str = Field(DEFAULT_SYMBOL, min_length=1)
    series_error_message: str = DEFAULT_SERIES_ERROR_MESSAGE

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        frozen=True,
        populate_by_name=True,
        str_strip_whitespace=True,
        extra="ignore",
    )

    @field_validator("environment", mode="before")
    @classmethod
    def parse_environment(cls, v: Any) -> Any:
        """Environment names are case-insensitive."""
        if isinstance(v, str):
            return Environment.from_str(v)
        return v

    @field_validator("api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @model_validator(mode="before")
    @classmethod
    def fill_base_url(cls, data: Any) -> Any:
        """Fall back to the environment's default base URL."""
        if not isinstance(data, dict) or data.get("api_base_url"):
            return data
        raw = None
        for key, value in data.items():
            if key.lower() in ("environment", ENV_ENVIRONMENT.lower()):
                raw = value
        environment = Environment.DEVELOPMENT if raw is None else raw
        if isinstance(environment, str):
            environment = Environment.from_str(environment)
        return {**data, "api_base_url": default_base_url(environment)}


def load_settings(*, base_url: str | None = None, **overrides: Any) -> Settings:
    """Build settings from the environment plus explicit overrides.

    Raises:
        ConfigurationError: If the environment holds invalid values or no
            base URL can be resolved
    """
    if base_url:
        overrides["api_base_url"] = base_url
    try:
        return Settings(**overrides)
    except pydantic.ValidationError as e:
        raise ConfigurationError(f"Invalid settings: {e}") from e


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Process-wide settings, resolved on first use."""
    return load_settings()
