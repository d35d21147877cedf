# app/schemas/device.py
"""
Pydantic schemas for device registration.
"""
from typing import Optional

from pydantic import AliasChoices, BaseModel, Field


class RegisterTokenIn(BaseModel):
    """
    Request model for registering a push device address.
    Older clients send the address as "token".
    """
    userId: Optional[str] = None
    address: Optional[str] = Field(default=None, validation_alias=AliasChoices("address", "token"))
