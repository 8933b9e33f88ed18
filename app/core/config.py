# app/core/config.py

import os
from functools import lru_cache
from typing import List, Annotated
from pydantic import ConfigDict, BeforeValidator
from pydantic_settings import BaseSettings, NoDecode


def _parse_origin_list(value):
    if value in (None, "", []):
        return ["*"]
    if isinstance(value, str):
        return [origin.strip() for origin in value.split(",") if origin.strip()]
    if isinstance(value, (list, tuple, set)):
        return [str(origin).strip() for origin in value if str(origin).strip()]
    return ["*"]


def _resolve_env_file():
    """ENV_FILE (default .env), or None when that file does not exist"""
    env_file = os.environ.get("ENV_FILE", ".env")
    return env_file if os.path.exists(env_file) else None


class Settings(BaseSettings):
    """
    Application settings.
    Loads values from environment variables (.env file)
    """
    # Service identity (reported by / and /api/health)
    APP_NAME: str = "Logistics Dashboard API"
    APP_VERSION: str = "2.0.0"

    # Environment
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3001

    # CORS - comma separated in the environment, e.g. "http://localhost:5173,https://dash.example.com"
    CORS_ORIGINS: Annotated[List[str], NoDecode, BeforeValidator(lambda v: _parse_origin_list(v))] = ["*"]

    # Rates are simulated, advertised through the health endpoint
    MOCK_DATA: bool = True

    model_config = ConfigDict(
        env_file=_resolve_env_file(),
        case_sensitive=True,
        extra="ignore",
    )


@lru_cache()
def get_settings():
    """Cached settings to avoid loading .env file for every request"""
    return Settings()

def clear_settings_cache():
    """Clear the settings cache - useful when switching between environments"""
    get_settings.cache_clear()
