"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    environment: str = _ENVIRONMENT
    default_plan_days: int = 7
    max_plan_days: int = 90
    match_max_attempts: int = 20
    match_good_enough_score: float = 50.0
    match_protein_weight: float = 2.0
    exercise_candidate_limit: int = 50
    current_plan_ttl_seconds: int = 300
    random_seed: int | None = None

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
