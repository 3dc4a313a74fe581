"""
Coupon listing endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from shopfront_api.core.context import AppContext, get_context

from . import repository

router = APIRouter()


@router.get("/coupons")
async def get_coupons(context: AppContext = Depends(get_context)) -> dict:
    coupons = await repository.list_active_coupons(context.database)
    return {"coupons": coupons, "count": len(coupons)}
