"""
Session guard for protected FastAPI routes.

Runs before any handler logic: the handler only executes once the bearer
token verifies and still points at an existing user.
"""

from __future__ import annotations

from fastapi import Depends, Header

from shopfront_api.core.context import AppContext, get_context
from shopfront_api.core.errors import Forbidden, Unauthenticated
from shopfront_api.users import repository as user_repository

from .tokens import InvalidToken


def _extract_bearer_token(authorization: str | None) -> str:
    raw = (authorization or "").strip()
    parts = raw.split(" ", 1)
    if len(parts) != 2:
        raise Unauthenticated("Access Denied. No token provided.")

    scheme, token = parts[0].strip().lower(), parts[1].strip()
    if scheme != "bearer" or not token:
        raise Unauthenticated("Access Denied. No token provided.")
    return token


async def get_bearer_token(authorization: str | None = Header(default=None)) -> str:
    return _extract_bearer_token(authorization)


async def get_current_user_id(
    access_token: str = Depends(get_bearer_token),
    context: AppContext = Depends(get_context),
) -> int:
    try:
        claims = context.tokens.verify(access_token)
    except InvalidToken as exc:
        raise Forbidden("Invalid or Expired Token.") from exc

    user = await user_repository.get_user_by_id(context.database, claims.user_id)
    if user is None:
        raise Forbidden("User not found or token invalid.")
    return claims.user_id
