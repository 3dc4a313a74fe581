"""
Auth business logic: signup and mobile-number login.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

import asyncpg
from fastapi import status

from shopfront_api.core.context import AppContext
from shopfront_api.core.errors import Conflict, NotFound, ValidationError
from shopfront_api.users import repository as user_repository

from . import schemas

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def normalize_email(email: str | None) -> str:
    return (email or "").strip().lower()


def normalize_mobile(mobile_number: str | None) -> str:
    return (mobile_number or "").strip()


def to_user_response(user_row: dict) -> schemas.UserResponse:
    return schemas.UserResponse(
        id=int(user_row["id"]),
        mobile_number=str(user_row["mobile_number"]),
        email=str(user_row["email"]),
        name=str(user_row["name"]),
        last_login=user_row.get("last_login"),
        created_at=user_row.get("created_at"),
    )


async def signup(context: AppContext, payload: schemas.SignupRequest) -> schemas.AuthResponse:
    mobile_number = normalize_mobile(payload.mobile_number)
    email = normalize_email(payload.email)
    name = (payload.name or "").strip()
    if not mobile_number or not email or not name:
        raise ValidationError("All fields are required")

    existing = await user_repository.get_user_by_mobile(context.database, mobile_number)
    if existing is not None:
        raise Conflict("User already exists. Please log in.", status_code=status.HTTP_400_BAD_REQUEST)

    try:
        user_row = await user_repository.create_user(
            context.database,
            mobile_number=mobile_number,
            email=email,
            name=name,
            signed_up_at=_utc_now(),
        )
    except asyncpg.UniqueViolationError as exc:
        # Lost a race with a concurrent signup for the same number.
        raise Conflict("User already exists. Please log in.", status_code=status.HTTP_400_BAD_REQUEST) from exc

    logger.info("signup_complete user_id=%s", user_row["id"])
    return schemas.AuthResponse(
        message="Signup successful",
        token=context.tokens.issue(user_row),
        user=to_user_response(user_row),
    )


async def login(context: AppContext, payload: schemas.LoginRequest) -> schemas.AuthResponse:
    mobile_number = normalize_mobile(payload.mobile_number)
    if not mobile_number:
        raise ValidationError("Mobile number is required")

    user_row = await user_repository.record_login(
        context.database,
        mobile_number,
        logged_in_at=_utc_now(),
    )
    if user_row is None:
        raise NotFound("User not found. Please sign up.")

    logger.info("login_complete user_id=%s", user_row["id"])
    return schemas.AuthResponse(
        message="Login successful",
        token=context.tokens.issue(user_row),
        user=to_user_response(user_row),
    )
