"""
Services Module

Core operations and their external delivery collaborators:
- Credentials: registration, login, password change
- Devices: push device address registration
- Notifications: routine notification dispatch
- Push: gateway interface, FCM / log adapters and the backend factory
"""

# Core operations
from .credentials import CredentialManager
from .devices import DeviceAddressRegistry
from .notifications import NotificationDispatcher, compose_message, parse_performed_flag

# Push delivery
from .push_base import PushGateway, PushGatewayError, PushMessage
from .push_fcm import FcmPushGateway, LogPushGateway
from .push_factory import build_push_gateway

__all__ = [
    # Core operations
    "CredentialManager",
    "DeviceAddressRegistry",
    "NotificationDispatcher",
    "compose_message",
    "parse_performed_flag",
    # Push delivery
    "PushGateway",
    "PushGatewayError",
    "PushMessage",
    "FcmPushGateway",
    "LogPushGateway",
    "build_push_gateway",
]
