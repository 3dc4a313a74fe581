"""
User profile endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from shopfront_api.auth import dependencies as auth_dependencies
from shopfront_api.core.context import AppContext, get_context

from . import service

router = APIRouter()


@router.get("/user")
async def get_user(
    user_id: int = Depends(auth_dependencies.get_current_user_id),
    context: AppContext = Depends(get_context),
) -> dict:
    """
    Current user with all of their addresses.
    """
    return {"user": await service.profile(context, user_id=user_id)}
