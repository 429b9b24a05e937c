"""The active home screen: what client apps fetch."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from fastapi.responses import Response

from homescreen.dependencies import get_repositories
from homescreen.models.screen import ActiveScreenSummary, SetActiveRequest
from homescreen.repos import Repositories
from homescreen.utils.api_response import send_error, send_not_found, send_success

router = APIRouter(prefix="/api/screen", tags=["screen"])

NO_ACTIVE_SCREEN = "No active screen configuration found. Please set one using /api/screen/set"


@router.get("", status_code=status.HTTP_200_OK)
async def get_active_screen(repos: Repositories = Depends(get_repositories)) -> Response:
    """Get the active screen configuration with sections and movies inlined."""
    screen = await repos.screen_configurations.get_active()
    if screen is None:
        return send_error(NO_ACTIVE_SCREEN, status.HTTP_404_NOT_FOUND)
    return send_success(screen)


@router.post("/set", status_code=status.HTTP_200_OK)
async def set_active_screen(
    req: SetActiveRequest,
    repos: Repositories = Depends(get_repositories),
) -> Response:
    """Mark a screen configuration as active; returns its id and name."""
    if not req.id:
        return send_error("Configuration ID is required in request body", status.HTTP_400_BAD_REQUEST)

    configuration = await repos.screen_configurations.set_active(req.id)
    if configuration is None:
        return send_not_found("Screen configuration")

    summary = ActiveScreenSummary(id=configuration["id"], name=configuration.get("name"))
    return send_success(summary.model_dump())
