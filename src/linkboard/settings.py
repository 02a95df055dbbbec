"""
linkboard.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for all layers.
- Hide secrets from repr/logging (JWT secret, identity provider API key).
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Env-driven configuration (prefix `LINKBOARD_`).
    Defaults are safe for local dev; prod must override the secrets.
    """

    model_config = SettingsConfigDict(env_prefix="LINKBOARD_", case_sensitive=False)

    # Environment controls toggle behavior like auto-init DB tables and the dev token endpoint.
    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "linkboard"
    log_level: str = "INFO"
    log_json: bool = True

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Session tokens issued by the identity provider
    jwt_alg: str = "HS256"
    jwt_issuer: str = "linkboard-identity"
    jwt_audience: str = "linkboard-api"
    jwt_secret: str = Field(default="dev-secret-change-me", repr=False)

    # Identity provider user directory (optional; without it plans come from the token only)
    identity_api_base_url: str | None = None
    identity_api_key: str = Field(default="", repr=False)
    identity_api_timeout_s: float = 5.0

    # Capability keys checked against the session's `pla` claim
    plan_capability_pro: str = "pro_plan"
    plan_capability_free: str = "free_user"

    # Persistence
    database_url: str = "sqlite+aiosqlite:///./linkboard.db"
    # PostgreSQL only: expose verified claims to row-level security policies.
    forward_claims_to_store: bool = False


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each request dependency.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Every other layer receives a `Settings` instance; nothing reads os.environ directly.
