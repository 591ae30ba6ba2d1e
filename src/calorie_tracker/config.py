"""Application configuration."""

import os
from typing import Literal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    nx_app_id: str
    nx_api_key: str
    nx_base_url: str = "https://trackapi.nutritionix.com"
    nx_remote_user_id: str = "0"
    timezone: str = "UTC"
    state_backend: Literal["file", "supabase"] = "file"
    state_dir: str = ".calorie-tracker"
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    supabase_table: str = "state_records"
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown timezone: {value!r}") from exc
        return value
