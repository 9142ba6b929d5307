from __future__ import annotations

from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    ENV: str = "dev"

    # where trade-log CSVs come from: "local" or "github"
    TRADES_SOURCE: str = "local"
    CSV_DIR: str = "trades"

    GITHUB_REPO: str = ""
    GITHUB_PATH: str = ""
    GITHUB_REF: str = "main"
    GITHUB_TOKEN: str = ""
    GITHUB_TIMEOUT: float = 20.0
    FETCH_WORKERS: int = 8

    CORS_ORIGINS: List[str] = ["http://localhost:3000"]
    CORS_ORIGIN_REGEX: str = r"https://.*\.vercel\.app"

    # Pydantic v2 config
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache()
def get_settings() -> Settings:
    return Settings()
