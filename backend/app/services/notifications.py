"""
Routine Notification Dispatch

One sender, one receiver, one push:
1. Resolve the receiver's device address (required)
2. Resolve the sender's display name (falls back to the raw id)
3. Compose title/body/data for the performed or not-yet-performed variant
4. Hand the message to the push gateway
"""
import logging
from typing import Optional, Union

from app.config import settings
from app.core.results import Result, ResultCode, missing
from app.core.user_store import UserStore, UserStoreError
from .push_base import PushGateway, PushMessage

logger = logging.getLogger("uvicorn.error")

PERFORMED_TEMPLATE = "✅ {sender} started the '{routine}' routine!"
NOT_PERFORMED_TEMPLATE = "❌ {sender} has not done the '{routine}' routine yet!"


def parse_performed_flag(value: Union[bool, str, None]) -> Optional[bool]:
    """
    Normalize the isPerformed flag.

    Accepts booleans and the strings "true"/"false" (any case) that older
    clients send. Returns None for anything else, including a missing flag.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered == "true":
            return True
        if lowered == "false":
            return False
    return None


def compose_message(sender_name: str, from_user: str, routine_name: str,
                    is_performed: bool, title: Optional[str] = None) -> PushMessage:
    """Build the notification; names are interpolated verbatim."""
    template = PERFORMED_TEMPLATE if is_performed else NOT_PERFORMED_TEMPLATE
    return PushMessage(
        title=title if title is not None else settings.notification_title,
        body=template.format(sender=sender_name, routine=routine_name),
        data={
            "fromUser": from_user,
            "routineName": routine_name,
            "isPerformed": "true" if is_performed else "false",
        },
    )


class NotificationDispatcher:
    def __init__(self, store: UserStore, gateway: PushGateway):
        self.store = store
        self.gateway = gateway

    async def dispatch(self, from_user: Optional[str], to_user: Optional[str],
                       routine_name: Optional[str],
                       is_performed: Union[bool, str, None]) -> Result:
        logger.info("[notify] request from=%s to=%s routine=%r isPerformed=%r",
                    from_user, to_user, routine_name, is_performed)

        # An absent flag is a validation error; False is a valid value
        if missing(from_user, to_user, routine_name) or is_performed is None:
            logger.info("[notify] rejected: missing fields")
            return Result.validation_error()
        performed = parse_performed_flag(is_performed)
        if performed is None:
            logger.info("[notify] rejected: isPerformed=%r is not a boolean", is_performed)
            return Result.validation_error("isPerformed must be true or false")

        try:
            receiver = await self.store.get(to_user)
            if receiver is None:
                logger.info("[notify] target not found: to=%s", to_user)
                return Result(ResultCode.NOT_FOUND, "Target user not found")
            if not receiver.device_address:
                logger.info("[notify] target has no device token: to=%s", to_user)
                return Result(ResultCode.NO_ADDRESS, "Target user has no FCM token")

            sender = await self.store.get(from_user)
        except UserStoreError:
            logger.exception("[notify] lookup failed: from=%s to=%s", from_user, to_user)
            return Result.internal_error()

        sender_name = sender.nickname if sender is not None else from_user
        message = compose_message(sender_name, from_user, routine_name, performed)

        try:
            receipt = await self.gateway.send(receiver.device_address, message)
        except Exception:
            logger.exception("[notify] push via %s failed: from=%s to=%s",
                             self.gateway.name, from_user, to_user)
            return Result(ResultCode.GATEWAY_FAILURE, "Notification delivery failed")

        logger.info("[notify] ✅ sent from=%s to=%s receipt=%s", from_user, to_user, receipt)
        return Result(ResultCode.SENT, "Notification sent")
