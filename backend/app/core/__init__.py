# app/core/__init__.py
"""
Core application modules.
Contains essential infrastructure components:
- db: Database configuration and connection management
- results: Result codes shared by every operation
- security: Password hashing and verification
- user_store: User store interface and its Tortoise implementation
"""
