"""
Newsletter signup endpoint.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr

from shopfront_api.core.context import AppContext, get_context
from shopfront_api.core.errors import Conflict, ValidationError

from . import repository

logger = logging.getLogger(__name__)

router = APIRouter()


class SubscribeRequest(BaseModel):
    email: EmailStr | None = None


@router.post("/subscribe", status_code=status.HTTP_201_CREATED)
async def subscribe(
    payload: SubscribeRequest,
    context: AppContext = Depends(get_context),
) -> dict:
    email = (payload.email or "").strip().lower()
    if not email:
        raise ValidationError("Email is required")

    row = await repository.add_subscriber(context.database, email)
    if row is None:
        raise Conflict("Email is already subscribed")

    logger.info("newsletter_subscribed subscriber_id=%s", row["id"])
    return {"message": "Subscribed successfully"}
