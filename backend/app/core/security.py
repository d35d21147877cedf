# app/core/security.py
"""
Security module for password handling.
Hashes passwords with a slow, salted one-way function and verifies them
with the constant-time comparison provided by passlib.
"""
from passlib.context import CryptContext

from app.config import settings

# Password hashing context
# Argon2 embeds a fresh random salt and its parameters in every hash string,
# so two hashes of the same password never match byte for byte.
pwd_context = CryptContext(
    schemes=["argon2"],  # Use Argon2 for password hashing
    deprecated="auto",   # Automatically handle deprecated schemes
    argon2__rounds=settings.password_hash_rounds,  # Fixed work factor (time cost)
)

def hash_password(plain: str) -> str:
    """
    Hash a plain text password using Argon2.

    Args:
        plain: Plain text password to hash

    Returns:
        Hashed password string (safe to store in database)

    Note: Never store plain text passwords. Always use this function before saving.
    """
    return pwd_context.hash(plain)

def verify_password(plain: str, hashed: str) -> bool:
    """
    Verify a plain text password against a hashed password.

    Args:
        plain: Plain text password to verify
        hashed: Hashed password from database

    Returns:
        True if password matches, False otherwise

    Raises:
        ValueError: If the stored hash is not a recognised Argon2 hash
    """
    return pwd_context.verify(plain, hashed)
