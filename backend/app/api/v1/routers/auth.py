# app/api/v1/routers/auth.py
from fastapi import APIRouter, Depends
from app.api.v1.deps import get_credential_manager
from app.api.v1.responses import to_response
from app.schemas.auth import RegisterIn, LoginIn, ChangePasswordIn
from app.services.credentials import CredentialManager

router = APIRouter(prefix="/auth", tags=["auth"])

@router.post("/register")
async def register(body: RegisterIn, credentials: CredentialManager = Depends(get_credential_manager)):
    """
    Register a new user account.

    Args:
        body: Request body containing:
            - userId: str (must be unique)
            - password: str (hashed before storage)
            - nickname: str (display name used in notifications)

    Returns:
        201 with {"success": True, "data": {"userId", "nickname", "message"}}, or an error envelope:
            - VALIDATION_ERROR (400): a field is missing or empty
            - CONFLICT (409): userId already registered
    """
    result = await credentials.register(body.userId, body.password, body.nickname)
    return to_response(result)

@router.post("/login")
async def login(body: LoginIn, credentials: CredentialManager = Depends(get_credential_manager)):
    """
    Check a userId/password pair.

    No token or cookie is issued; the response only says whether the
    credentials are valid.

    Error codes:
        - VALIDATION_ERROR (400): userId or password missing
        - NOT_FOUND (404): no such user
        - UNAUTHORIZED (401): wrong password
    """
    result = await credentials.authenticate(body.userId, body.password)
    return to_response(result)

@router.post("/change-password")
async def change_password(body: ChangePasswordIn,
                          credentials: CredentialManager = Depends(get_credential_manager)):
    """
    Replace a user's password after verifying the current one.

    Error codes:
        - VALIDATION_ERROR (400): a field is missing
        - NOT_FOUND (404): no such user
        - UNAUTHORIZED (401): current password does not match
    """
    result = await credentials.change_password(body.userId, body.currentPassword, body.newPassword)
    return to_response(result)
