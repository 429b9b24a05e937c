"""
Response helpers.

Success payloads are sent as-is (no envelope). Errors always have the shape
``{"success": false, "error": "<message>"}``.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from homescreen.models.api import ApiErrorResponse
from homescreen.schemas.document_schema import DocumentValidationError

logger = logging.getLogger(__name__)

CIRCULAR_MARKER = "[Circular Reference]"


def send_success(data: Any = None, status_code: int = status.HTTP_200_OK) -> Response:
    """
    Send ``data`` directly as JSON.

    Falls back to safe_stringify() if the payload cannot be encoded normally
    (for example a circular structure).
    """
    try:
        return JSONResponse(content=jsonable_encoder(data), status_code=status_code)
    except (TypeError, ValueError, RecursionError) as e:
        logger.warning("Error serializing response data, using safe stringify instead: %s", e)
        return Response(
            content=safe_stringify(data),
            status_code=status_code,
            media_type="application/json",
        )


def send_error(error: Exception | str, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR) -> Response:
    """Send an error response and log it."""
    message = str(error) or error.__class__.__name__
    if status_code >= 500:
        logger.error("%s %s", status_code, message)
    else:
        logger.info("%s %s", status_code, message)

    body = ApiErrorResponse(error=message).model_dump()
    return JSONResponse(content=body, status_code=status_code)


def send_not_found(resource_name: str) -> Response:
    """Send the standard 404 for a missing resource."""
    return send_error(f"{resource_name} not found", status.HTTP_404_NOT_FOUND)


def safe_stringify(data: Any) -> str:
    """JSON-encode ``data``, replacing circular references with a marker."""
    return json.dumps(_break_cycles(data, set()), default=str)


def _break_cycles(value: Any, ancestors: set[int]) -> Any:
    if isinstance(value, (dict, list, tuple)):
        if id(value) in ancestors:
            return CIRCULAR_MARKER
        ancestors.add(id(value))
        try:
            if isinstance(value, dict):
                return {str(k): _break_cycles(v, ancestors) for k, v in value.items()}
            return [_break_cycles(v, ancestors) for v in value]
        finally:
            ancestors.discard(id(value))
    return value


def register_exception_handlers(app: FastAPI) -> None:
    """Convert every uncaught failure into the standard error shape."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(_request: Request, exc: StarletteHTTPException) -> Response:
        return send_error(str(exc.detail), exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(_request: Request, exc: RequestValidationError) -> Response:
        errors = exc.errors()
        message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
        return send_error(message, status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(DocumentValidationError)
    async def document_validation_handler(_request: Request, exc: DocumentValidationError) -> Response:
        return send_error(exc, status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(_request: Request, exc: Exception) -> Response:
        logger.exception("Unhandled error: %s", exc)
        return send_error(exc, status.HTTP_500_INTERNAL_SERVER_ERROR)
