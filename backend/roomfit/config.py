"""
Application Settings

Environment-driven configuration for the API and the default layout policy.
Every value can be overridden with a ROOMFIT_-prefixed environment variable
or a .env file next to the process.
"""

import functools
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

from roomfit.models.room import Clearances, QualityPolicy


class Settings(BaseSettings):
    """Runtime settings."""

    model_config = SettingsConfigDict(
        env_prefix="ROOMFIT_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = "Roomfit API"
    app_version: str = "0.1.0"
    api_prefix: str = "/api/v1"
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: List[str] = ["http://localhost:3000", "http://localhost:5173"]

    # Layout policy defaults (feet)
    aisle_min: float = 3.0
    chair_back_to_table: float = 1.5
    chair_to_chair: float = 2.5
    wall_gap_tol: float = 0.1

    max_warnings: int = 2
    max_passes: int = 12

    def clearances(self) -> Clearances:
        return Clearances(
            aisle_min=self.aisle_min,
            chair_back_to_table=self.chair_back_to_table,
            chair_to_chair=self.chair_to_chair,
            wall_gap_tol=self.wall_gap_tol,
        )

    def quality_policy(self) -> QualityPolicy:
        return QualityPolicy(max_warnings=self.max_warnings, max_passes=self.max_passes)


@functools.lru_cache()
def get_settings() -> Settings:
    """Cached settings instance (read the environment once)."""
    return Settings()
