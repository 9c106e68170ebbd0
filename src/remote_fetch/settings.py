"""
remote_fetch.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide env-driven settings for the transport and logging layers.
- Offer a cached settings instance for callers that do not build their own.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_POLICY_HEADERS = frozenset({"cache-control", "content-type"})


class Settings(BaseSettings):
    """
    All fields can be overridden with `REMOTE_FETCH_*` environment variables.
    """

    model_config = SettingsConfigDict(env_prefix="REMOTE_FETCH_", case_sensitive=False)

    service_name: str = "remote-fetch"
    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "json"

    # Prefix for relative request URLs; absolute URLs bypass it.
    base_url: str = ""
    user_agent: str = "remote-fetch/0.1"

    # None keeps httpx's own default timeout.
    timeout_seconds: float | None = Field(default=None, gt=0)

    # Sent on every request ahead of the per-call headers.
    default_headers: dict[str, str] = Field(default_factory=dict)

    @field_validator("default_headers")
    @classmethod
    def _no_policy_headers(cls, value: dict[str, str]) -> dict[str, str]:
        # Cache-Control is chosen per call (CachePolicy); Content-Type is always JSON.
        for name in value:
            if name.lower() in _POLICY_HEADERS:
                raise ValueError(f"{name} cannot be set in default_headers")
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for every orchestrator built from defaults.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Tests construct `Settings(...)` directly instead of mutating the environment.
