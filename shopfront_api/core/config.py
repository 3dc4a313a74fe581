"""
Process-wide settings, read from the environment once at startup.

Components receive a `Settings` instance explicitly; nothing else in the app
reads `os.environ`.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_JWT_SECRET = "dev-change-this-secret"


def _env_str(name: str, default: str) -> str:
    return os.environ.get(name, default).strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    return raw in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    database_url: str = ""
    jwt_secret: str = DEFAULT_JWT_SECRET
    jwt_algorithm: str = "HS256"
    token_expire_days: int = 7
    allowed_origin: str = "http://localhost:3000"
    port: int = 5000
    sweep_enabled: bool = True
    sweep_interval_hours: int = 168
    inactive_after_months: int = 3
    log_level: str = "INFO"
    db_pool_min: int = 1
    db_pool_max: int = 5

    @classmethod
    def from_env(cls, *, dotenv: bool = True) -> "Settings":
        if dotenv:
            # Real environment variables win over `.env` entries.
            load_dotenv(override=False)

        return cls(
            database_url=os.environ.get("DATABASE_URL", "").strip(),
            jwt_secret=_env_str("JWT_SECRET", DEFAULT_JWT_SECRET),
            jwt_algorithm=_env_str("JWT_ALG", "HS256"),
            token_expire_days=_env_int("TOKEN_EXPIRE_DAYS", 7),
            allowed_origin=_env_str("ALLOWED_ORIGIN", "http://localhost:3000"),
            port=_env_int("PORT", 5000),
            sweep_enabled=_env_bool("SWEEP_ENABLED", True),
            sweep_interval_hours=_env_int("SWEEP_INTERVAL_HOURS", 168),
            inactive_after_months=_env_int("INACTIVE_AFTER_MONTHS", 3),
            log_level=_env_str("LOG_LEVEL", "INFO").upper(),
            db_pool_min=_env_int("DB_POOL_MIN", 1),
            db_pool_max=_env_int("DB_POOL_MAX", 5),
        )
