# app/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Your configuration and DB
from app.config import settings
from app.core.db import init_db, close_db
from app.core.user_store import TortoiseUserStore

from app.api.v1.routers import auth, devices, notifications
from app.api.v1.responses import register_error_handlers
from app.services.push_factory import build_push_gateway

logger = logging.getLogger("uvicorn.error")

app = FastAPI(title=settings.APP_NAME)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

@app.on_event("startup")
async def on_startup():
    await init_db()
    # Collaborators are built once here and handed to handlers via app.api.v1.deps
    app.state.user_store = TortoiseUserStore()
    app.state.push_gateway = build_push_gateway()
    logger.info("[startup] %s ready (env=%s, push=%s)",
                settings.APP_NAME, settings.env, app.state.push_gateway.name)

@app.on_event("shutdown")
async def on_shutdown():
    await close_db()

# REST
app.include_router(auth.router, prefix="/api/v1")
app.include_router(devices.router, prefix="/api/v1")
app.include_router(notifications.router, prefix="/api/v1")

@app.get("/")
def root():
    return {"message": "✅ Routine notification API is running."}

@app.get("/healthz")
def healthz():
    return {"ok": True}
