# app/config.py
"""
Application configuration using Pydantic-Settings.
All settings can be overridden via environment variables or .env file.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Service ───────────────────────────────────────────────────────────
    APP_NAME: str = "driver-hub-api"
    API_PREFIX: str = "/api/v1"

    # ── Store ─────────────────────────────────────────────────────────────
    # Default is a process-local in-memory SQLite database.
    DATABASE_URL: str = "sqlite://"

    # ── Network ───────────────────────────────────────────────────────────
    BACKEND_HOST: str = "0.0.0.0"
    BACKEND_PORT: int = 3001
    CORS_ORIGINS: str = "*"          # Comma-separated list of allowed origins

    # ── Seed data ─────────────────────────────────────────────────────────
    SEED_DEMO_DATA: bool = True
    SEED_TASK_DUE_DAYS: int = 2

    # ── Logging ───────────────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = True

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
