# app/config.py
import os
from pydantic import BaseModel
from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file

class Settings(BaseModel):
    # General app settings
    APP_NAME: str = "Routine Notify API"
    env: str = os.getenv("ENV", "dev")

    # Host & Port settings
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # CORS origins for the mobile web build / local tooling
    CORS_ORIGINS: list[str] = [
        origin.strip()
        for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000").split(",")
        if origin.strip()
    ]

    # Password hashing (Argon2 time cost, fixed for every hash)
    password_hash_rounds: int = int(os.getenv("PASSWORD_HASH_ROUNDS", "3"))

    # Push delivery
    # "fcm" sends through Firebase Cloud Messaging, "log" only writes the message to the log
    push_backend: str = os.getenv("PUSH_BACKEND", "log").lower()
    # FCM authenticates with a service account: FIREBASE_CONFIG holds its JSON,
    # FCM_SERVICE_ACCOUNT_FILE points at the downloaded key file
    fcm_credentials_json: str | None = os.getenv("FIREBASE_CONFIG")
    fcm_credentials_file: str | None = os.getenv("FCM_SERVICE_ACCOUNT_FILE")
    fcm_project_id: str | None = os.getenv("FCM_PROJECT_ID")  # defaults to the service account's project
    fcm_api_base: str = os.getenv("FCM_API_BASE", "https://fcm.googleapis.com/v1")
    fcm_timeout_seconds: float = float(os.getenv("FCM_TIMEOUT_SECONDS", "10"))

    # Notification content
    notification_title: str = os.getenv("NOTIFICATION_TITLE", "Routine alert")

settings = Settings()  # Instantiate configuration
