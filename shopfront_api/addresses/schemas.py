"""
Pydantic schemas for address endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

ADDRESS_FIELDS = (
    "full_name",
    "mobile_number",
    "address_line1",
    "address_line2",
    "landmark",
    "pincode",
    "city",
    "state",
    "type",
)

# NOT NULL columns in `addresses`.
REQUIRED_FIELDS = ("full_name", "address_line1", "pincode", "city", "state")


class AddressUpdateRequest(BaseModel):
    """
    Partial update. The contact number is fixed at creation and is not
    part of this model; unknown keys are ignored.
    """

    full_name: str | None = Field(default=None, max_length=200)
    address_line1: str | None = Field(default=None, max_length=500)
    address_line2: str | None = Field(default=None, max_length=500)
    landmark: str | None = Field(default=None, max_length=200)
    pincode: str | None = Field(default=None, max_length=12)
    city: str | None = Field(default=None, max_length=100)
    state: str | None = Field(default=None, max_length=100)
    type: str | None = Field(default=None, max_length=30)


class AddressCreateRequest(AddressUpdateRequest):
    full_name: str = Field(..., min_length=1, max_length=200)
    mobile_number: str | None = Field(default=None, max_length=20)
    address_line1: str = Field(..., min_length=1, max_length=500)
    pincode: str = Field(..., min_length=1, max_length=12)
    city: str = Field(..., min_length=1, max_length=100)
    state: str = Field(..., min_length=1, max_length=100)
