"""
User profile logic.
"""

from __future__ import annotations

from shopfront_api.addresses import repository as address_repository
from shopfront_api.core.context import AppContext
from shopfront_api.core.errors import NotFound

from . import repository


async def profile(context: AppContext, *, user_id: int) -> dict:
    user = await repository.get_user_by_id(context.database, user_id)
    if user is None:
        raise NotFound("User not found")

    addresses = await address_repository.list_addresses(context.database, user_id=user_id)
    return {**user, "addresses": addresses}
