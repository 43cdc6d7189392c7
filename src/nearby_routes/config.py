"""Application configuration and settings management."""

from pathlib import Path
from typing import Any, Literal, Optional

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="NR_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Nearby Routes API"
    api_prefix: str = "/api"
    log_level: str = Field(default="INFO", description="Root logging level applied at startup.")
    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(
            "http://localhost:8081",
            "http://127.0.0.1:8081",
            "http://localhost:19006",
            "http://127.0.0.1:19006",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    fallback_origin_latitude: float = Field(
        default=28.6139,
        ge=-90.0,
        le=90.0,
        description="Vendor latitude used when the location provider has no fix.",
    )
    fallback_origin_longitude: float = Field(default=77.2090, ge=-180.0, le=180.0)
    earth_radius_km: float = Field(default=6371.0, gt=0.0)

    tour_strategy: Literal["nearest_neighbor", "ortools"] = Field(
        default="nearest_neighbor",
        description="Tour planner used when a request does not name one.",
    )
    solver_first_solution_strategy: str = Field(default="PATH_CHEAPEST_ARC")
    solver_local_search_metaheuristic: str = Field(default="GUIDED_LOCAL_SEARCH")
    solver_time_limit_seconds: int = Field(default=2, ge=1)

    simulation_tick_seconds: float = Field(
        default=1.0,
        gt=0.0,
        description="Period of the position simulator, also the simulated time added per tick.",
    )
    simulation_radius_degrees: float = Field(default=0.004, gt=0.0)
    simulation_angle_period_ms: float = Field(default=10000.0, gt=0.0)

    roster_file: Optional[Path] = Field(
        default=None,
        description="Optional CSV of nearby consumers loaded into the controller at startup.",
    )

    @field_validator("roster_file", mode="before")
    @classmethod
    def _expand_path(cls, value: Any) -> Optional[Path]:
        if value is None or value == "":
            return None
        path_value = value if isinstance(value, Path) else Path(str(value))
        return path_value.expanduser().resolve()

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
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
