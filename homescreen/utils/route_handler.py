"""
Standard REST routes for a CRUD resource.

register_routes() wires list/get/create/update/delete handlers onto a router:

    GET    ""      list (id, <field>, <field>_like, <field>_in, _sort, _order)
    GET    /{id}   detail
    POST   ""      create -> 201
    PUT    /{id}   partial update
    PATCH  /{id}   same as PUT
    DELETE /{id}   -> {"id": id}
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from fastapi import APIRouter, Body, Depends, Request, status
from fastapi.responses import Response
from starlette.datastructures import QueryParams

from homescreen.repos.crud_service import CrudService
from homescreen.utils.api_response import send_not_found, send_success
from homescreen.utils.filtering import RawQuery, get_filter_options
from homescreen.utils.query_builder import QueryOptions
from homescreen.utils.sorting import get_sort_options

ServiceGetter = Callable[..., CrudService]


def query_params_to_dict(params: QueryParams) -> dict[str, str | list[str]]:
    """Collapse query params into a dict; repeated keys become lists. Order is kept."""
    raw: dict[str, str | list[str]] = {}
    for key in params.keys():
        values = params.getlist(key)
        raw[key] = values if len(values) > 1 else values[0]
    return raw


def get_ids_from_query(query: RawQuery) -> list[str] | None:
    value = query.get("id")
    if not value:
        return None
    return value if isinstance(value, list) else [value]


def register_routes(
    router: APIRouter,
    resource_name: str,
    get_service: ServiceGetter,
    field_mappings: Mapping[str, str] | None = None,
) -> None:
    """
    Register the standard REST routes for one resource.

    Args:
        router: Router to attach handlers to
        resource_name: Used in 404 messages ("<resource_name> not found")
        get_service: FastAPI dependency returning the resource's CrudService
        field_mappings: Optional query-parameter to document-field renames
    """

    @router.get("", status_code=status.HTTP_200_OK)
    async def list_resources(request: Request, service: CrudService = Depends(get_service)) -> Response:
        raw = query_params_to_dict(request.query_params)
        options = QueryOptions(
            ids=get_ids_from_query(raw),
            filters=get_filter_options(raw, field_mappings),
            sort=get_sort_options(raw),
        )
        return send_success(await service.get_many(options))

    @router.get("/{resource_id}", status_code=status.HTTP_200_OK)
    async def get_resource(resource_id: str, service: CrudService = Depends(get_service)) -> Response:
        item = await service.get_by_id(resource_id)
        if item is None:
            return send_not_found(resource_name)
        return send_success(item)

    @router.post("", status_code=status.HTTP_201_CREATED)
    async def create_resource(
        data: dict[str, Any] = Body(...),
        service: CrudService = Depends(get_service),
    ) -> Response:
        item = await service.create(data)
        return send_success(item, status.HTTP_201_CREATED)

    async def update_resource(
        resource_id: str,
        data: dict[str, Any] = Body(...),
        service: CrudService = Depends(get_service),
    ) -> Response:
        item = await service.update(resource_id, data)
        if item is None:
            return send_not_found(resource_name)
        return send_success(item)

    router.add_api_route("/{resource_id}", update_resource, methods=["PUT"], status_code=status.HTTP_200_OK)
    # PATCH is an alias of PUT; updates are always partial.
    router.add_api_route("/{resource_id}", update_resource, methods=["PATCH"], status_code=status.HTTP_200_OK)

    @router.delete("/{resource_id}", status_code=status.HTTP_200_OK)
    async def delete_resource(resource_id: str, service: CrudService = Depends(get_service)) -> Response:
        item = await service.delete(resource_id)
        if item is None:
            return send_not_found(resource_name)
        return send_success({"id": resource_id})
