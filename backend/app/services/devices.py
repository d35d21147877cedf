"""
Device address registry: stores the push token a user's phone reports.
"""
import logging
from typing import Optional

from app.core.results import Result, ResultCode, missing
from app.core.user_store import UserStore, UserStoreError

logger = logging.getLogger("uvicorn.error")


class DeviceAddressRegistry:
    def __init__(self, store: UserStore):
        self.store = store

    async def set_address(self, user_id: Optional[str], address: Optional[str]) -> Result:
        """
        Overwrite the user's device address.

        The user must already exist; this never creates an account.
        Repeating the call with the same address leaves the record unchanged.
        """
        if missing(user_id, address):
            logger.info("[device] token rejected: missing fields (userId=%s)", user_id)
            return Result.validation_error("Missing userId or token")

        try:
            if await self.store.get(user_id) is None:
                logger.info("[device] token for unknown userId=%s", user_id)
                return Result(ResultCode.NOT_FOUND, "User not found")
            if not await self.store.update(user_id, device_address=address):
                return Result(ResultCode.NOT_FOUND, "User not found")
        except UserStoreError:
            logger.exception("[device] token update failed: userId=%s", user_id)
            return Result.internal_error()

        logger.info("[device] token updated for userId=%s", user_id)
        return Result(ResultCode.UPDATED, "FCM token updated")
