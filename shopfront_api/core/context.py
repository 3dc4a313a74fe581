"""
Per-app dependency container.

Built once in `create_app` and stored on `app.state.context`. Routes get it
through the `get_context` dependency; the lifecycle job is handed it directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from fastapi import Request

from shopfront_api.auth.tokens import TokenCodec

from .config import Settings
from .db import Database


@dataclass
class AppContext:
    settings: Settings
    database: Database
    tokens: TokenCodec

    @classmethod
    def from_settings(cls, settings: Settings) -> "AppContext":
        database = Database(
            settings.database_url,
            min_size=settings.db_pool_min,
            max_size=settings.db_pool_max,
        )
        tokens = TokenCodec(
            settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
            ttl=timedelta(days=settings.token_expire_days),
        )
        return cls(settings=settings, database=database, tokens=tokens)


def get_context(request: Request) -> AppContext:
    return request.app.state.context
