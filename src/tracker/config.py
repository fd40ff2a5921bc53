"""Application configuration and settings management."""

from typing import Any

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="TRACKER_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Tour Tracker API"
    api_prefix: str = "/api"
    catalog_base_url: str = Field(
        default="https://groupietrackers.herokuapp.com/api",
        description="Base URL of the remote artist catalog API.",
    )
    catalog_artists_path: str = "artists"
    catalog_locations_path: str = "locations"
    catalog_dates_path: str = "dates"
    catalog_relations_path: str = "relation"
    client_timeout_seconds: float = Field(
        default=10.0,
        gt=0.0,
        description="Timeout applied to every outbound HTTP call.",
    )
    geocoder_url: str = Field(
        default="https://nominatim.openstreetmap.org/search",
        description="Search endpoint of the Nominatim-compatible geocoding service.",
    )
    geocoder_user_agent: str = Field(
        default="TourTracker/1.0",
        description="User-Agent sent to the geocoder (required by Nominatim usage policy).",
    )
    geocode_max_parallel_requests: int = Field(
        default=5,
        ge=1,
        description="Maximum geocoding calls in flight within a single batch resolution.",
    )
    refresh_on_startup: bool = Field(
        default=True,
        description="Load the catalog when the application starts.",
    )
    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    @field_validator("catalog_base_url", "geocoder_url", mode="after")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            # Try JSON first
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()


settings = Settings()
