"""
Runtime settings, read from ``FHIR_R4_*`` environment variables.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class FhirSettings(BaseSettings):
    """Settings for decoding and logging."""

    model_config = SettingsConfigDict(
        env_prefix="FHIR_R4_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(default="INFO")
    log_format: Literal["console", "json"] = Field(default="console")
    # pydantic strict mode: no "true" -> True style coercion while decoding
    strict_decoding: bool = Field(default=False)


@lru_cache
def get_settings() -> FhirSettings:
    """Get cached settings instance."""
    return FhirSettings()
