"""
Inactive-account cleanup (raw SQL).
"""

from __future__ import annotations

from datetime import datetime

from shopfront_api.core.db import Database
from shopfront_api.users.repository import aware


async def delete_inactive_users(database: Database, *, cutoff: datetime) -> list[int]:
    """
    Delete every user whose last login is strictly before `cutoff`, together
    with their addresses, in a single transaction.

    Addresses go first so the users delete never trips the foreign key. If
    either statement fails, nothing is deleted.

    Returns the deleted user ids.
    """
    async with database.transaction() as conn:
        rows = await conn.fetch(
            """
            SELECT id
            FROM users
            WHERE COALESCE(last_login, created_at) < $1
            ORDER BY id
            FOR UPDATE
            """,
            aware(cutoff),
        )
        user_ids = [int(r["id"]) for r in rows]
        if not user_ids:
            return []

        await conn.execute(
            "DELETE FROM addresses WHERE user_id = ANY($1::bigint[])",
            user_ids,
        )
        await conn.execute(
            "DELETE FROM users WHERE id = ANY($1::bigint[])",
            user_ids,
        )
        return user_ids
