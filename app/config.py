"""
Application configuration using Pydantic-Settings.
All settings can be overridden via environment variables or .env file.
"""

from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    # ── Database ──────────────────────────────────────────────────────────
    DATABASE_URL: str = "sqlite:///./fleet.db"
    STORAGE_BACKEND: str = "sql"     # sql | memory

    # ── Network ───────────────────────────────────────────────────────────
    BACKEND_HOST: str = "0.0.0.0"
    BACKEND_PORT: int = 8080
    API_PREFIX: str = "/api"

    # ── Security ──────────────────────────────────────────────────────────
    API_KEY: Optional[str] = None   # Set in .env to enable auth on API endpoints

    # ── Startup ───────────────────────────────────────────────────────────
    SEED_SAMPLE_DATA: bool = True   # Seed the demo fleet into an empty store

    # ── Validation thresholds ─────────────────────────────────────────────
    MAINTENANCE_INTERVAL_DAYS: int = 183     # ~6 months between services
    HIGH_MILEAGE_KM: int = 200_000
    UPCOMING_MAINTENANCE_DAYS: int = 30      # Chat scheduling window

    # ── Logging ───────────────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[str] = None   # Defaults to <repo>/logs
    LOG_FILE: str = "fleet.log"     # Empty string disables file logging

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
