"""
lists_backend.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for all layers.
- Hide secrets from repr/logging (e.g., JWT secret).
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Read once at process start and injected into services/repositories.
    Nothing below the composition root reads the environment directly.
    """

    model_config = SettingsConfigDict(env_prefix="LISTS_", case_sensitive=False)

    # Environment controls toggle behavior like auto-init DB tables.
    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "lists-backend"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 5000

    # Auth
    jwt_alg: Literal["HS256"] = "HS256"
    jwt_secret: str = Field(default="dev-secret-change-me-0123456789abcdef", repr=False)
    access_token_ttl_minutes: int = Field(default=15, ge=1)
    refresh_token_ttl_hours: int = Field(default=24, ge=1)
    bcrypt_cost: int = Field(default=10, ge=4, le=31)

    # Persistence
    database_url: str = "sqlite+aiosqlite:///./lists.db"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each request dependency.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Token lifetimes and the bcrypt cost live here so tests can shrink them
# without touching the services.
