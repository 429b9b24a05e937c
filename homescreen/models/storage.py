"""Blob storage request and response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class UploadBase64Request(BaseModel):
    """What the client sends to upload a base64-encoded file."""

    model_config = {"populate_by_name": True}

    file: str | None = None  # raw base64 or a data: URL
    content_type: str | None = Field(default=None, alias="contentType")
    key: str | None = None


class UploadResponse(BaseModel):
    """What the upload endpoints return."""

    key: str
    success: bool = True
    url: str


class FileUrlResponse(BaseModel):
    """What the download URL endpoint returns."""

    success: bool = True
    url: str


class DeleteFileResponse(BaseModel):
    """What the delete endpoint returns."""

    success: bool = True
    message: str = "File deleted successfully"
