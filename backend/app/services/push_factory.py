"""
Push Gateway Factory

Selects the delivery backend from PUSH_BACKEND:
- fcm: Firebase Cloud Messaging (needs FIREBASE_CONFIG or FCM_SERVICE_ACCOUNT_FILE in .env)
- log: write notifications to the server log only
"""
import logging

from ..config import settings
from .push_base import PushGateway
from .push_fcm import FcmPushGateway, LogPushGateway

logger = logging.getLogger("uvicorn.error")


def build_push_gateway() -> PushGateway:
    """
    Build the configured push gateway

    Returns:
    - PushGateway: New gateway instance

    Raises:
    - RuntimeError: Unknown backend, or FCM selected without credentials
    """
    backend = settings.push_backend
    if backend == "fcm":
        gateway = FcmPushGateway()
        if not gateway.is_available():
            raise RuntimeError(
                "PUSH_BACKEND=fcm but no FCM service account (FIREBASE_CONFIG / FCM_SERVICE_ACCOUNT_FILE) or project id is configured in .env"
            )
    elif backend == "log":
        gateway = LogPushGateway()
    else:
        raise RuntimeError(f"Unknown PUSH_BACKEND: {backend!r} (expected 'fcm' or 'log')")

    logger.info("[push] Using %s gateway", gateway.name)
    return gateway
