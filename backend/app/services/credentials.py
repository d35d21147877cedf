"""
Credential lifecycle: registration, login and password rotation.

Passwords are hashed with app.core.security (Argon2, random salt per call).
Hashing and verification are CPU bound, so they run in a worker thread.
"""
import asyncio
import logging
from typing import Optional

from app.core.results import Result, ResultCode, missing
from app.core.security import hash_password, verify_password
from app.core.user_store import UserAlreadyExistsError, UserRecord, UserStore, UserStoreError

logger = logging.getLogger("uvicorn.error")


class CredentialManager:
    def __init__(self, store: UserStore):
        self.store = store

    async def register(self, user_id: Optional[str], password: Optional[str],
                       nickname: Optional[str]) -> Result:
        if missing(user_id, password, nickname):
            logger.info("[auth] register rejected: missing fields (userId=%s)", user_id)
            return Result.validation_error()

        try:
            if await self.store.get(user_id) is not None:
                logger.info("[auth] register conflict: userId=%s", user_id)
                return Result(ResultCode.CONFLICT, "User already exists")

            password_hash = await asyncio.to_thread(hash_password, password)
            await self.store.create(UserRecord(
                user_id=user_id,
                password_hash=password_hash,
                nickname=nickname,
                device_address=None,
            ))
        except UserAlreadyExistsError:
            # Lost a race with a concurrent registration for the same id
            logger.info("[auth] register conflict at insert: userId=%s", user_id)
            return Result(ResultCode.CONFLICT, "User already exists")
        except UserStoreError:
            logger.exception("[auth] register failed: userId=%s", user_id)
            return Result.internal_error()

        logger.info("[auth] registered userId=%s", user_id)
        return Result(ResultCode.CREATED, "User registered",
                      {"userId": user_id, "nickname": nickname})

    async def authenticate(self, user_id: Optional[str], password: Optional[str]) -> Result:
        if missing(user_id, password):
            logger.info("[auth] login rejected: missing fields (userId=%s)", user_id)
            return Result.validation_error()

        try:
            record = await self.store.get(user_id)
            if record is None:
                logger.info("[auth] login for unknown userId=%s", user_id)
                return Result(ResultCode.NOT_FOUND, "User not found")
            matched = await asyncio.to_thread(verify_password, password, record.password_hash)
        except (UserStoreError, ValueError):
            logger.exception("[auth] login failed: userId=%s", user_id)
            return Result.internal_error()

        if not matched:
            logger.info("[auth] login rejected: wrong password for userId=%s", user_id)
            return Result(ResultCode.UNAUTHORIZED, "Incorrect password")

        return Result(ResultCode.SUCCESS, "Login successful",
                      {"userId": record.user_id, "nickname": record.nickname})

    async def change_password(self, user_id: Optional[str], current_password: Optional[str],
                              new_password: Optional[str]) -> Result:
        if missing(user_id, current_password, new_password):
            logger.info("[auth] change-password rejected: missing fields (userId=%s)", user_id)
            return Result.validation_error()

        try:
            record = await self.store.get(user_id)
            if record is None:
                logger.info("[auth] change-password for unknown userId=%s", user_id)
                return Result(ResultCode.NOT_FOUND, "User not found")

            matched = await asyncio.to_thread(verify_password, current_password, record.password_hash)
            if not matched:
                logger.info("[auth] change-password rejected: wrong current password for userId=%s", user_id)
                return Result(ResultCode.UNAUTHORIZED, "Incorrect current password")

            new_hash = await asyncio.to_thread(hash_password, new_password)
            if not await self.store.update(user_id, password_hash=new_hash):
                return Result(ResultCode.NOT_FOUND, "User not found")
        except (UserStoreError, ValueError):
            logger.exception("[auth] change-password failed: userId=%s", user_id)
            return Result.internal_error()

        logger.info("[auth] password changed for userId=%s", user_id)
        return Result(ResultCode.SUCCESS, "Password changed successfully")
