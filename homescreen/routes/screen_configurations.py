"""Screen configuration CRUD routes plus set-active."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from fastapi.responses import Response

from homescreen.dependencies import get_repositories
from homescreen.models.screen import SetActiveRequest
from homescreen.repos import CrudService, Repositories
from homescreen.utils.api_response import send_error, send_not_found, send_success
from homescreen.utils.route_handler import register_routes

router = APIRouter(prefix="/api/screen-configurations", tags=["screen-configurations"])


def get_screen_configuration_service(repos: Repositories = Depends(get_repositories)) -> CrudService:
    return repos.screen_configurations.service


@router.post("/set-active", status_code=status.HTTP_200_OK)
async def set_active_screen_configuration(
    req: SetActiveRequest,
    repos: Repositories = Depends(get_repositories),
) -> Response:
    """Mark a screen configuration as the active one."""
    if not req.id:
        return send_error("Configuration ID is required in request body", status.HTTP_400_BAD_REQUEST)

    configuration = await repos.screen_configurations.set_active(req.id)
    if configuration is None:
        return send_not_found("ScreenConfiguration")
    return send_success(configuration)


register_routes(
    router,
    resource_name="ScreenConfiguration",
    get_service=get_screen_configuration_service,
)
