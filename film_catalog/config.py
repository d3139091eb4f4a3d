"""
Catalog service settings.

Values come from the process environment, after a local .env
file (if any) has been loaded into it. Connection strings and
other deployment details never live in code.
"""

import os
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes")


class Settings:
    """Environment-derived settings for the catalog API."""

    APP_NAME: str = "Film Catalog"
    APP_VERSION: str = "0.1.0"
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    DEBUG: bool = _env_flag("DEBUG")

    # uvicorn bind address, used by ``python -m film_catalog.main``
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8000"))

    # Tests point this at SQLite before the engine is built
    DATABASE_URL: str = os.getenv(
        "DATABASE_URL", "postgresql://localhost:5432/film_catalog"
    )

    # Root logger level name, plus an optional file to mirror output to
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_FILE: str | None = os.getenv("LOG_FILE") or None


@lru_cache()
def get_settings() -> Settings:
    """Build the Settings once; later calls reuse the same instance."""
    return Settings()
