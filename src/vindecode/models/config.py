from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_NHTSA_BASE_URL = "https://vpic.nhtsa.dot.gov/api/vehicles"


class AppSettings(BaseSettings):
    """Library settings populated from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="VINDECODE_",
        extra="ignore",
    )

    nhtsa_base_url: str = DEFAULT_NHTSA_BASE_URL
    nhtsa_timeout: float = 10.0
    user_agent: str = "vindecode"

    @field_validator("nhtsa_base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")
