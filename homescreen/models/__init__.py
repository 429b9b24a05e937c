"""
Pydantic models for the home screen CMS.

Request/response shapes and shared enums. No imports from db, repos, or routes.
"""

from homescreen.models.api import ApiErrorResponse
from homescreen.models.screen import ActiveScreenSummary, SetActiveRequest
from homescreen.models.section import SECTIONS_WITH_MOVIES, SectionType, keeps_movie_items
from homescreen.models.storage import (
    DeleteFileResponse,
    FileUrlResponse,
    UploadBase64Request,
    UploadResponse,
)

__all__ = [
    # API envelope
    "ApiErrorResponse",
    # Section models
    "SectionType",
    "SECTIONS_WITH_MOVIES",
    "keeps_movie_items",
    # Screen configuration models
    "SetActiveRequest",
    "ActiveScreenSummary",
    # Storage models
    "UploadBase64Request",
    "UploadResponse",
    "FileUrlResponse",
    "DeleteFileResponse",
]
