"""
Push Gateway Abstract Interface

Provides a unified interface for push delivery providers (FCM / log-only / others).
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict


@dataclass
class PushMessage:
    """Notification payload handed to a gateway"""
    title: str
    body: str
    data: Dict[str, str] = field(default_factory=dict)  # FCM only accepts string values


class PushGatewayError(Exception):
    """Delivery failed at or before the provider"""


class PushGateway(ABC):
    """Push delivery abstract base class"""

    @abstractmethod
    async def send(self, address: str, message: PushMessage) -> str:
        """
        Deliver one notification

        Parameters:
        - address: Device address (FCM registration token)
        - message: Title, body and data block

        Returns:
        - str: Provider delivery receipt (message id)

        Raises:
        - PushGatewayError: Provider rejected the message or could not be reached
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Gateway name (for logging)"""
        pass
