"""12-factor configuration adapter using environment variables and optional TOML route file."""

import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server configuration
    host: str = Field(default="0.0.0.0", description="Host to bind the server to")
    port: int = Field(default=3000, description="Port to bind the server to")
    cors_allow_origins: list[str] = Field(
        default=["*"], description="Origins allowed to call the API from a browser"
    )
    rate_limit_per_minute: int = Field(
        default=100,
        description="Maximum number of requests allowed per IP address per minute",
    )

    # Upstream API configuration
    upstream_base_url: str = Field(
        default="https://v6.db.transport.rest",
        description="Base URL of the transport.rest HAFAS API",
    )
    upstream_timeout_seconds: float = Field(
        default=10.0, description="Total timeout for a single upstream request in seconds"
    )
    upstream_user_agent: str = Field(
        default="r7-delays/1.0.0",
        description="User-Agent header sent to the upstream API",
    )
    upstream_min_delay_seconds: float = Field(
        default=0.0,
        description="Minimum delay between upstream requests in seconds (0 disables spacing)",
    )
    log_upstream_requests: bool = Field(
        default=False,
        description="Log every upstream request with its status and latency",
    )
    probe_query: str = Field(
        default="Saarbrücken",
        description="Well-known place name used for the one-time availability probe",
    )
    force_simulation: bool = Field(
        default=False,
        description="Never contact the upstream API and always serve simulated data",
    )
    simulation_seed: int | None = Field(
        default=None, description="Seed for simulated data, for reproducible output"
    )

    # Resolution configuration
    lookahead_minutes: int = Field(
        default=120, description="How far ahead to look for departures in minutes"
    )
    departure_results: int = Field(
        default=50, description="Maximum number of departures requested per station"
    )
    station_candidates: int = Field(
        default=5, description="Number of directory candidates considered per stop"
    )
    upcoming_departures: int = Field(
        default=5, description="Number of upcoming departures reported per stop"
    )
    search_results: int = Field(
        default=10, description="Number of directory results requested for station search"
    )
    search_min_query_length: int = Field(
        default=2, description="Minimum length of a station search query"
    )

    # Route file (optional). The built-in R7 route is used when unset.
    config_file: str | None = Field(
        default=None,
        description="Path to TOML file defining the route and its stops",
    )

    @field_validator(
        "lookahead_minutes",
        "departure_results",
        "station_candidates",
        "upcoming_departures",
        "search_results",
        "search_min_query_length",
        "rate_limit_per_minute",
    )
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate counts and windows are positive."""
        if v < 1:
            raise ValueError("value must be at least 1")
        return v

    @field_validator("upstream_timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Validate the upstream timeout is positive."""
        if v <= 0:
            raise ValueError("upstream_timeout_seconds must be positive")
        return v

    @field_validator("upstream_min_delay_seconds")
    @classmethod
    def validate_min_delay(cls, v: float) -> float:
        """Validate the request spacing is not negative."""
        if v < 0:
            raise ValueError("upstream_min_delay_seconds must not be negative")
        return v

    def load_route_data(self) -> dict[str, Any] | None:
        """Load raw route data from the TOML file, or None if no file is configured.

        Expected layout is a [route] table plus [[stops]] entries.
        """
        if not self.config_file:
            return None

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        route = toml_data.get("route", {})
        if not isinstance(route, dict):
            raise ValueError("TOML config 'route' must be a table")
        stops = toml_data.get("stops", [])
        if not isinstance(stops, list):
            raise ValueError("TOML config 'stops' must be a list")

        return {**route, "stops": stops}
