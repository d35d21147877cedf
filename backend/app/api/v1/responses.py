# app/api/v1/responses.py
"""
Single translation point from core results to HTTP.

Routers return `to_response(result)`; nothing else in the application picks
status codes. Framework-level failures (unparseable body, unexpected
exceptions) are folded into the same envelope by the handlers registered in
`register_error_handlers`.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.results import Result, ResultCode

logger = logging.getLogger("uvicorn.error")

STATUS_BY_CODE: dict[ResultCode, int] = {
    ResultCode.CREATED: status.HTTP_201_CREATED,
    ResultCode.UPDATED: status.HTTP_200_OK,
    ResultCode.SUCCESS: status.HTTP_200_OK,
    ResultCode.SENT: status.HTTP_200_OK,
    ResultCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ResultCode.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ResultCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ResultCode.CONFLICT: status.HTTP_409_CONFLICT,
    ResultCode.NO_ADDRESS: status.HTTP_400_BAD_REQUEST,
    ResultCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ResultCode.GATEWAY_FAILURE: status.HTTP_502_BAD_GATEWAY,
}

def envelope(result: Result) -> dict:
    """
    Build the response body.

    Success: {"success": True, "data": {..., "message": ...}}
    Failure: {"success": False, "error": {"code": ..., "message": ...}}
    """
    if result.ok:
        return {"success": True, "data": {**result.data, "message": result.message}}
    return {"success": False, "error": {"code": result.code.value, "message": result.message}}

def to_response(result: Result) -> JSONResponse:
    return JSONResponse(status_code=STATUS_BY_CODE[result.code], content=envelope(result))

def register_error_handlers(app: FastAPI) -> None:
    """Register handlers that keep framework errors inside the same taxonomy."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning("[api] invalid request body on %s: %s", request.url.path, exc.errors())
        return to_response(Result.validation_error("Malformed request body"))

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error("[api] unhandled exception on %s", request.url.path, exc_info=exc)
        return to_response(Result.internal_error())
