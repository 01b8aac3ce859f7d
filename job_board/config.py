from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Safe defaults; override via environment or .env file
    APP_NAME: str = "Job Board API"
    APP_ENV: str = "dev"
    LOG_LEVEL: str = "INFO"
    CORS_ALLOW_ORIGINS: str = "*"  # comma-separated

    # "file" keeps jobs in JSON documents under DATA_DIR, "database" uses DATABASE_URL
    STORE_BACKEND: Literal["file", "database"] = "file"
    DATA_DIR: Path = Path("data")
    DATABASE_URL: str = "postgresql+psycopg2://postgres:postgres@db:5432/postgres"

    ADMIN_EMAIL: str = ""
    ADMIN_PASSWORD: str = ""
    # optional machine access to admin routes via X-API-Key
    API_KEY: str = ""

    FETCH_TIMEOUT_SECONDS: float = 10.0

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ALLOW_ORIGINS.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()
