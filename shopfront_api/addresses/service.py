"""
Address business logic.
"""

from __future__ import annotations

import logging
from typing import Any

from shopfront_api.core.context import AppContext
from shopfront_api.core.errors import NotFound, ValidationError

from . import repository, schemas

logger = logging.getLogger(__name__)

MAX_ADDRESS_ID = 2**63 - 1


def parse_address_id(raw: str, *, message: str) -> int:
    # Anything that cannot be a bigint id matches no address.
    raw = (raw or "").strip()
    if not (raw.isascii() and raw.isdigit()):
        raise NotFound(message)
    address_id = int(raw)
    if not 1 <= address_id <= MAX_ADDRESS_ID:
        raise NotFound(message)
    return address_id


def _clean_fields(payload: schemas.AddressUpdateRequest) -> dict[str, Any]:
    fields = payload.model_dump(exclude_unset=True)
    fields = {k: v.strip() if isinstance(v, str) else v for k, v in fields.items()}

    missing = [name for name in schemas.REQUIRED_FIELDS if name in fields and not fields[name]]
    if missing:
        raise ValidationError(f"{', '.join(missing)} cannot be empty")
    return fields


async def add_address(context: AppContext, payload: schemas.AddressCreateRequest, *, user_id: int) -> dict:
    address = await repository.create_address(
        context.database,
        user_id=user_id,
        fields=_clean_fields(payload),
    )
    logger.info("address_created address_id=%s user_id=%s", address["id"], user_id)
    return address


async def edit_address(
    context: AppContext,
    raw_address_id: str,
    payload: schemas.AddressUpdateRequest,
    *,
    user_id: int,
) -> dict:
    not_found = "Address not found or unauthorized access."
    address_id = parse_address_id(raw_address_id, message=not_found)

    fields = _clean_fields(payload)
    if not fields:
        raise ValidationError("No address fields to update")

    address = await repository.update_address(
        context.database,
        address_id,
        user_id=user_id,
        fields=fields,
    )
    if address is None:
        raise NotFound(not_found)

    logger.info("address_updated address_id=%s user_id=%s", address_id, user_id)
    return address


async def remove_address(context: AppContext, raw_address_id: str, *, user_id: int) -> None:
    not_found = "Address not found or unauthorized"
    address_id = parse_address_id(raw_address_id, message=not_found)

    deleted = await repository.delete_address(context.database, address_id, user_id=user_id)
    if not deleted:
        raise NotFound(not_found)
    logger.info("address_deleted address_id=%s user_id=%s", address_id, user_id)
