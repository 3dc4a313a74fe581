"""
Auth API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from shopfront_api.core.context import AppContext, get_context

from . import schemas, service

router = APIRouter()


@router.post("/signup", status_code=status.HTTP_201_CREATED)
async def signup(
    payload: schemas.SignupRequest,
    context: AppContext = Depends(get_context),
) -> schemas.AuthResponse:
    return await service.signup(context, payload)


@router.post("/login")
async def login(
    payload: schemas.LoginRequest,
    context: AppContext = Depends(get_context),
) -> schemas.AuthResponse:
    return await service.login(context, payload)
