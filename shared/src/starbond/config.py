"""Engine configuration from environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Tunable scoring constants loaded from environment variables."""

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Synastry
    neutral_category_score: int = Field(default=50, ge=0, le=100, alias="NEUTRAL_CATEGORY_SCORE")

    # Candidate matching (empirical ceiling, not a theoretical maximum)
    match_normalization: float = Field(default=28.0, gt=0, alias="MATCH_NORMALIZATION")

    # Durations
    duration_cap_days: float = Field(default=365.0, gt=0, alias="DURATION_CAP_DAYS")
    stationary_epsilon: float = Field(default=0.001, ge=0, alias="STATIONARY_EPSILON")
    collective_orb_window: float = Field(default=1.0, gt=0, alias="COLLECTIVE_ORB_WINDOW")

    # Transits
    personal_transit_limit: int = Field(default=5, ge=1, alias="PERSONAL_TRANSIT_LIMIT")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def reset_settings_cache() -> None:
    """Clear cached settings (useful in tests)."""
    get_settings.cache_clear()
