"""File upload/download routes backed by S3 storage."""

from __future__ import annotations

import base64
import binascii
import logging

from fastapi import APIRouter, Depends, File, UploadFile, status
from fastapi.responses import Response

from homescreen.config import settings
from homescreen.dependencies import get_storage
from homescreen.models.storage import (
    DeleteFileResponse,
    FileUrlResponse,
    UploadBase64Request,
    UploadResponse,
)
from homescreen.services.storage import StorageService
from homescreen.utils.api_response import send_error, send_success
from homescreen.utils.hash import generate_file_key

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/s3", tags=["storage"])

_DEFAULT_CONTENT_TYPE = "application/octet-stream"
_DEFAULT_EXTENSION = "jpg"


@router.post("/upload", status_code=status.HTTP_200_OK)
async def upload_file(
    file: UploadFile | None = File(default=None),
    storage: StorageService = Depends(get_storage),
) -> Response:
    """Upload a file sent as multipart form data under the ``file`` field."""
    if file is None:
        return send_error("No file provided", status.HTTP_400_BAD_REQUEST)

    # The size is known once the multipart body is spooled; check it before reading.
    if file.size is not None and file.size > settings.MAX_UPLOAD_BYTES:
        return send_error("File too large", status.HTTP_413_REQUEST_ENTITY_TOO_LARGE)

    body = await file.read()
    if len(body) > settings.MAX_UPLOAD_BYTES:
        return send_error("File too large", status.HTTP_413_REQUEST_ENTITY_TOO_LARGE)

    content_type = file.content_type or _DEFAULT_CONTENT_TYPE
    filename = file.filename or ""
    # Files without an extension get one from their content type.
    extension = filename.rsplit(".", 1)[-1] if "." in filename else ""
    key = generate_file_key(body, extension or _extension_for(file.content_type))

    try:
        url = await storage.upload_file(key, body, content_type)
    except Exception:
        logger.exception("Error uploading file")
        return send_error("Failed to upload file")

    return send_success(UploadResponse(key=key, url=url).model_dump())


@router.post("/upload-base64", status_code=status.HTTP_200_OK)
async def upload_base64(
    req: UploadBase64Request,
    storage: StorageService = Depends(get_storage),
) -> Response:
    """Upload a base64 string or data URL. The key is content-addressed unless given."""
    if not req.file:
        return send_error("No file data provided", status.HTTP_400_BAD_REQUEST)

    data = req.file.split(",", 1)[1] if req.file.startswith("data:") and "," in req.file else req.file
    try:
        body = base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError):
        return send_error("Invalid base64 file data", status.HTTP_400_BAD_REQUEST)

    if len(body) > settings.MAX_UPLOAD_BYTES:
        return send_error("File too large", status.HTTP_413_REQUEST_ENTITY_TOO_LARGE)

    content_type = req.content_type or _DEFAULT_CONTENT_TYPE
    key = req.key or generate_file_key(body, _extension_for(req.content_type))

    try:
        url = await storage.upload_file(key, body, content_type)
    except Exception:
        logger.exception("Error uploading base64 file")
        return send_error("Failed to upload file")

    return send_success(UploadResponse(key=key, url=url).model_dump())


@router.get("/file/{key}", status_code=status.HTTP_200_OK)
async def get_file_url(key: str, storage: StorageService = Depends(get_storage)) -> Response:
    """Get a pre-signed download URL for a file."""
    try:
        url = await storage.generate_presigned_download_url(key)
    except Exception:
        logger.exception("Error generating download URL")
        return send_error("Failed to generate download URL")

    return send_success(FileUrlResponse(url=url).model_dump())


@router.delete("/file/{key}", status_code=status.HTTP_200_OK)
async def delete_file(key: str, storage: StorageService = Depends(get_storage)) -> Response:
    """Delete a file."""
    try:
        await storage.delete_file(key)
    except Exception:
        logger.exception("Error deleting file")
        return send_error("Failed to delete file")

    return send_success(DeleteFileResponse().model_dump())


def _extension_for(content_type: str | None) -> str:
    """``image/png`` -> ``png``; a missing type or subtype -> ``jpg``."""
    subtype = content_type.split("/", 1)[1] if content_type and "/" in content_type else ""
    return subtype or _DEFAULT_EXTENSION
