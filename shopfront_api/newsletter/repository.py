"""
Newsletter subscriber persistence.
"""

from __future__ import annotations

from shopfront_api.core.db import Database


async def add_subscriber(database: Database, email: str) -> dict | None:
    """
    Insert a subscriber. Returns None if the email is already subscribed.
    """
    return await database.fetch_one(
        """
        INSERT INTO newsletter_subscribers (email)
        VALUES ($1)
        ON CONFLICT (email) DO NOTHING
        RETURNING id, email, created_at
        """,
        email,
    )
