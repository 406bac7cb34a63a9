"""Environment-driven runtime configuration helpers."""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import List

_DEFAULT_CORS_ORIGINS = (
    "http://localhost",
    "http://localhost:3000",
    "http://localhost:5000",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
)


def _normalize_bool(value: str | None, default: bool = False) -> bool:
    """Return normalized boolean from environment-style value."""
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"", "0", "false", "no", "off"}:
        return False
    if normalized in {"1", "true", "yes", "on"}:
        return True
    return default


def env_flag(name: str, default: bool = False) -> bool:
    return _normalize_bool(os.getenv(name), default=default)


def log_level_name() -> str:
    name = os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"
    return name if isinstance(logging.getLevelName(name), int) else "INFO"


def api_prefix() -> str:
    """Mount point for the resource routers (default ``/api``)."""
    raw = os.getenv("API_PREFIX", "/api").strip()
    if not raw or raw == "/":
        return ""
    return "/" + raw.strip("/")


def cors_origins() -> List[str]:
    raw = os.getenv("CORS_ALLOWED_ORIGINS", "")
    if not raw.strip():
        return list(_DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@lru_cache(maxsize=None)
def seed_password() -> str:
    """Password given to the demo accounts created by the seed routine."""
    return os.getenv("SHOWROOM_SEED_PASSWORD", "password123")


def refresh_config_cache() -> None:
    """Invalidate cached values (useful for tests)."""
    seed_password.cache_clear()
