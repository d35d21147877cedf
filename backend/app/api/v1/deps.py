# app/api/v1/deps.py
from fastapi import Depends, Request
from app.core.user_store import UserStore
from app.services.credentials import CredentialManager
from app.services.devices import DeviceAddressRegistry
from app.services.notifications import NotificationDispatcher
from app.services.push_base import PushGateway

def get_user_store(request: Request) -> UserStore:
    """
    FastAPI dependency returning the user store built at startup.

    The store lives on app.state (set in app.main's startup hook) rather than
    in a module-level global, so tests can swap it through
    app.dependency_overrides.
    """
    return request.app.state.user_store

def get_push_gateway(request: Request) -> PushGateway:
    """
    FastAPI dependency returning the push gateway built at startup.
    """
    return request.app.state.push_gateway

def get_credential_manager(store: UserStore = Depends(get_user_store)) -> CredentialManager:
    return CredentialManager(store)

def get_device_registry(store: UserStore = Depends(get_user_store)) -> DeviceAddressRegistry:
    return DeviceAddressRegistry(store)

def get_notification_dispatcher(
    store: UserStore = Depends(get_user_store),
    gateway: PushGateway = Depends(get_push_gateway),
) -> NotificationDispatcher:
    return NotificationDispatcher(store, gateway)
