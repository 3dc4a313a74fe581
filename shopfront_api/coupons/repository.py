"""
Coupon catalog reads. Coupons are managed outside this API.
"""

from __future__ import annotations

from shopfront_api.core.db import Database


async def list_active_coupons(database: Database) -> list[dict]:
    return await database.fetch_all(
        """
        SELECT id, code, description, discount_percent, valid_until, created_at
        FROM coupons
        WHERE is_active = true
          AND (valid_until IS NULL OR valid_until > now())
        ORDER BY created_at DESC, id DESC
        """
    )
