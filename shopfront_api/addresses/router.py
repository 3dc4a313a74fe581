"""
Address API endpoints (all protected).
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from shopfront_api.auth import dependencies as auth_dependencies
from shopfront_api.core.context import AppContext, get_context

from . import schemas, service

router = APIRouter()


@router.post("/address", status_code=status.HTTP_201_CREATED)
async def add_address(
    payload: schemas.AddressCreateRequest,
    user_id: int = Depends(auth_dependencies.get_current_user_id),
    context: AppContext = Depends(get_context),
) -> dict:
    address = await service.add_address(context, payload, user_id=user_id)
    return {"message": "Address added successfully", "address": address}


@router.put("/address/{address_id}")
async def edit_address(
    address_id: str,
    payload: schemas.AddressUpdateRequest,
    user_id: int = Depends(auth_dependencies.get_current_user_id),
    context: AppContext = Depends(get_context),
) -> dict:
    address = await service.edit_address(context, address_id, payload, user_id=user_id)
    return {"message": "Address updated successfully", "address": address}


@router.delete("/address/{address_id}")
async def delete_address(
    address_id: str,
    user_id: int = Depends(auth_dependencies.get_current_user_id),
    context: AppContext = Depends(get_context),
) -> dict:
    await service.remove_address(context, address_id, user_id=user_id)
    return {"message": "Address deleted successfully"}
