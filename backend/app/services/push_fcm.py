"""
Firebase Cloud Messaging adapter

Sends notifications through the FCM HTTP v1 API:
POST {api_base}/projects/{project_id}/messages:send

Requests are authorized with a short-lived OAuth2 access token minted from a
service account (FIREBASE_CONFIG JSON or FCM_SERVICE_ACCOUNT_FILE). Tokens
expire after about an hour; the credentials are refreshed whenever they are
no longer valid, so a long-running process keeps delivering.
"""
import asyncio
import json
import logging
import uuid

import httpx
from google.auth.exceptions import GoogleAuthError
from google.auth.transport.requests import Request as GoogleAuthRequest
from google.oauth2 import service_account

from ..config import settings
from .push_base import PushGateway, PushGatewayError, PushMessage

logger = logging.getLogger("uvicorn.error")

FCM_SCOPE = "https://www.googleapis.com/auth/firebase.messaging"


def load_service_account_credentials():
    """
    Load service-account credentials scoped for FCM

    Returns:
    - google.oauth2.service_account.Credentials, or None when nothing is configured

    Raises:
    - RuntimeError: FIREBASE_CONFIG / FCM_SERVICE_ACCOUNT_FILE is set but unusable
    """
    try:
        if settings.fcm_credentials_json:
            info = json.loads(settings.fcm_credentials_json)
            return service_account.Credentials.from_service_account_info(info, scopes=[FCM_SCOPE])
        if settings.fcm_credentials_file:
            return service_account.Credentials.from_service_account_file(
                settings.fcm_credentials_file, scopes=[FCM_SCOPE]
            )
    except (ValueError, OSError) as e:
        raise RuntimeError(f"Invalid FCM service account: {e.__class__.__name__}") from e
    return None


class FcmPushGateway(PushGateway):
    """FCM HTTP v1 push gateway"""

    def __init__(self, credentials=None):
        self.credentials = credentials if credentials is not None else load_service_account_credentials()
        # An explicit FCM_PROJECT_ID wins over the service account's own project
        self.project_id = settings.fcm_project_id or getattr(self.credentials, "project_id", None)
        self.api_base = settings.fcm_api_base.rstrip("/")
        self.timeout = settings.fcm_timeout_seconds

    @property
    def name(self) -> str:
        return "fcm"

    def is_available(self) -> bool:
        """Check if service-account credentials and a project id are configured"""
        return self.credentials is not None and bool(self.project_id)

    def build_request(self, address: str, message: PushMessage) -> dict:
        """Build the FCM v1 request body"""
        return {
            "message": {
                "token": address,
                "notification": {
                    "title": message.title,
                    "body": message.body,
                },
                "data": dict(message.data),
            }
        }

    async def _access_token(self) -> str:
        """Return a valid access token, refreshing the credentials if expired"""
        if not self.credentials.valid:
            try:
                # google-auth refreshes synchronously over requests
                await asyncio.to_thread(self.credentials.refresh, GoogleAuthRequest())
            except GoogleAuthError as e:
                raise PushGatewayError(f"FCM credential refresh failed: {e.__class__.__name__}") from e
            logger.info("[push:fcm] access token refreshed")
        return self.credentials.token

    async def send(self, address: str, message: PushMessage) -> str:
        if not self.is_available():
            raise PushGatewayError("FCM service account / project id not configured")

        url = f"{self.api_base}/projects/{self.project_id}/messages:send"
        headers = {
            "Authorization": f"Bearer {await self._access_token()}",
            "Content-Type": "application/json",
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.post(url, headers=headers, json=self.build_request(address, message))
                resp.raise_for_status()
                result = resp.json()
        except httpx.HTTPStatusError as e:
            raise PushGatewayError(f"FCM rejected message: HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise PushGatewayError(f"FCM request failed: {e.__class__.__name__}") from e

        # Successful sends answer {"name": "projects/<id>/messages/<message_id>"}
        receipt = result.get("name")
        if not receipt:
            raise PushGatewayError("FCM response carried no message name")
        return receipt


class LogPushGateway(PushGateway):
    """Writes notifications to the log instead of delivering them (local development)"""

    @property
    def name(self) -> str:
        return "log"

    async def send(self, address: str, message: PushMessage) -> str:
        receipt = f"log/{uuid.uuid4().hex}"
        logger.info("[push:log] to=%s… title=%r body=%r data=%s receipt=%s",
                    address[:8], message.title, message.body, message.data, receipt)
        return receipt
