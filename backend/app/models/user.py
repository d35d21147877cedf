# app/models/user.py
"""
Database model for users.
One row per user: login credentials, display name and the push device
address notifications are delivered to.
"""
from tortoise import fields, models

class User(models.Model):
    """
    User database model.

    Security:
    - Password is stored as an Argon2 hash (never store plain text passwords)
    - user_id is the primary key, so a second insert for the same id fails
      at the database instead of silently overwriting the first account
    """
    user_id = fields.CharField(max_length=128, pk=True)  # Client-chosen login id (immutable)
    password_hash = fields.CharField(max_length=255)  # Argon2 hash, salt embedded
    nickname = fields.CharField(max_length=128)  # Display name used in notifications
    device_address = fields.CharField(max_length=4096, null=True)  # FCM registration token, null until registered
    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "users"  # Database table name
