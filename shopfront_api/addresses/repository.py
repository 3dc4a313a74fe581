"""
Address persistence (raw SQL).

Every read and write is scoped by `user_id`; a row owned by someone else is
indistinguishable from a missing one.
"""

from __future__ import annotations

from typing import Any

from shopfront_api.core.db import Database

from .schemas import ADDRESS_FIELDS

ADDRESS_COLUMNS = "id, user_id, " + ", ".join(ADDRESS_FIELDS) + ", created_at"


async def create_address(database: Database, *, user_id: int, fields: dict[str, Any]) -> dict:
    values = [fields.get(name) for name in ADDRESS_FIELDS]
    placeholders = ", ".join(f"${i}" for i in range(2, len(ADDRESS_FIELDS) + 2))
    row = await database.fetch_one(
        f"""
        INSERT INTO addresses (user_id, {", ".join(ADDRESS_FIELDS)})
        VALUES ($1, {placeholders})
        RETURNING {ADDRESS_COLUMNS}
        """,
        user_id,
        *values,
    )
    if row is None:
        raise RuntimeError("Failed to create address.")
    return row


async def list_addresses(database: Database, *, user_id: int) -> list[dict]:
    return await database.fetch_all(
        f"""
        SELECT {ADDRESS_COLUMNS}
        FROM addresses
        WHERE user_id = $1
        ORDER BY created_at ASC, id ASC
        """,
        user_id,
    )


async def update_address(
    database: Database,
    address_id: int,
    *,
    user_id: int,
    fields: dict[str, Any],
) -> dict | None:
    """
    Update only the given columns. Returns None if the address does not exist
    or belongs to another user.
    """
    columns = [name for name in ADDRESS_FIELDS if name in fields]
    if not columns:
        raise ValueError("update_address called with no fields.")

    assignments = ", ".join(f"{name} = ${i}" for i, name in enumerate(columns, start=3))
    return await database.fetch_single(
        f"""
        UPDATE addresses
        SET {assignments}
        WHERE id = $1
          AND user_id = $2
        RETURNING {ADDRESS_COLUMNS}
        """,
        address_id,
        user_id,
        *[fields[name] for name in columns],
    )


async def delete_address(database: Database, address_id: int, *, user_id: int) -> bool:
    row = await database.fetch_single(
        """
        DELETE FROM addresses
        WHERE id = $1
          AND user_id = $2
        RETURNING id
        """,
        address_id,
        user_id,
    )
    return row is not None
