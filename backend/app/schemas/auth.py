# app/schemas/auth.py
"""
Pydantic schemas for authentication endpoints.
Every field is optional here so that a missing value reaches the service
layer and is reported as VALIDATION_ERROR, not as a framework 422.
"""
from typing import Optional

from pydantic import BaseModel


class RegisterIn(BaseModel):
    """
    Request model for user registration.
    """
    userId: Optional[str] = None  # Login id chosen by the client (must be unique)
    password: Optional[str] = None  # Plain text password (hashed server-side)
    nickname: Optional[str] = None  # Display name shown in notifications


class LoginIn(BaseModel):
    """
    Request model for user login endpoint.
    """
    userId: Optional[str] = None
    password: Optional[str] = None


class ChangePasswordIn(BaseModel):
    """
    Request model for password change.
    The current password must be supplied; there is no session to vouch for the caller.
    """
    userId: Optional[str] = None
    currentPassword: Optional[str] = None
    newPassword: Optional[str] = None
