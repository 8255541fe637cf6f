from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

MIN_PRECISION = 1
MAX_PRECISION = 32


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="GEOBITS_",
        case_sensitive=False,
    )

    # Bits per axis used when a caller does not pass a precision.
    default_precision: int = Field(default=26, ge=MIN_PRECISION, le=MAX_PRECISION)


@lru_cache
def get_settings() -> Settings:
    return Settings()
