"""Screen configuration request and response models."""

from __future__ import annotations

from pydantic import BaseModel


class SetActiveRequest(BaseModel):
    """What the client sends to mark a screen configuration active."""

    # Optional so a missing id surfaces as our own 400, not a schema error.
    id: str | None = None


class ActiveScreenSummary(BaseModel):
    """What POST /api/screen/set returns."""

    id: str
    name: str | None = None
