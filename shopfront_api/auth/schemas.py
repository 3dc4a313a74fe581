"""
Auth API schemas (request/response models).

Request fields are optional at the schema level so a missing field is reported
as a 400 with a readable message by the service, not as a generic schema error.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field


class SignupRequest(BaseModel):
    mobile_number: str | None = Field(default=None, max_length=20)
    email: EmailStr | None = None
    name: str | None = Field(default=None, max_length=200)


class LoginRequest(BaseModel):
    mobile_number: str | None = Field(default=None, max_length=20)


class UserResponse(BaseModel):
    id: int
    mobile_number: str
    email: str
    name: str
    last_login: datetime | None = None
    created_at: datetime | None = None


class AuthResponse(BaseModel):
    message: str
    token: str
    user: UserResponse
