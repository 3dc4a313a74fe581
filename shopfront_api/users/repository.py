"""
User persistence helpers.
"""

from __future__ import annotations

from datetime import datetime, timezone

from shopfront_api.core.db import Database

USER_COLUMNS = "id, mobile_number, email, name, last_login, created_at"


def aware(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


async def create_user(
    database: Database,
    *,
    mobile_number: str,
    email: str,
    name: str,
    signed_up_at: datetime,
) -> dict:
    # Signup counts as the first login for the inactivity sweep.
    row = await database.fetch_one(
        f"""
        INSERT INTO users (mobile_number, email, name, last_login, created_at)
        VALUES ($1, $2, $3, $4, $4)
        RETURNING {USER_COLUMNS}
        """,
        mobile_number,
        email,
        name,
        aware(signed_up_at),
    )
    if row is None:
        raise RuntimeError("Failed to create user.")
    return row


async def get_user_by_id(database: Database, user_id: int) -> dict | None:
    return await database.fetch_single(
        f"""
        SELECT {USER_COLUMNS}
        FROM users
        WHERE id = $1
        """,
        user_id,
    )


async def get_user_by_mobile(database: Database, mobile_number: str) -> dict | None:
    return await database.fetch_single(
        f"""
        SELECT {USER_COLUMNS}
        FROM users
        WHERE mobile_number = $1
        """,
        mobile_number,
    )


async def record_login(database: Database, mobile_number: str, *, logged_in_at: datetime) -> dict | None:
    """
    Stamp `last_login` for the user with this mobile number.

    Returns the updated user, or None if no user has that number.
    """
    return await database.fetch_single(
        f"""
        UPDATE users
        SET last_login = $2
        WHERE mobile_number = $1
        RETURNING {USER_COLUMNS}
        """,
        mobile_number,
        aware(logged_in_at),
    )
