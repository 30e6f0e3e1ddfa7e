from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

_PROJECT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Data layer settings loaded from environment variables."""

    # Console REST API — resource paths (/contact, /coupons, ...) are appended
    api_url: str = "http://localhost:5000/api"
    # Seconds; unset keeps the HTTP library default
    request_timeout: float | None = None

    # Key under which the auth collaborator stores the admin bearer token
    auth_token_key: str = "adminToken"

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / library-wide
    log_level_http: str = "WARNING"          # httpx / httpcore — outbound HTTP
    log_level_transport: str = "INFO"        # request normalization
    log_level_store: str = "INFO"            # resource stores

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
