"""Tests for the generic CRUD service factory."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest
from bson import ObjectId

from homescreen.repos.crud_service import create_crud_service
from homescreen.schemas.document_schema import DocumentValidationError
from homescreen.utils.filtering import Filter, FilterOperator
from homescreen.utils.query_builder import QueryOptions
from homescreen.utils.sorting import SortOption, SortOrder

pytestmark = pytest.mark.asyncio(loop_scope="session")


@pytest.fixture
def movies(repos):
    return repos.movies


async def test_create_returns_formatted_document(movies):
    movie = await movies.create({"title": "Alien", "description": "In space", "poster": "p.png"})

    assert ObjectId.is_valid(movie["id"])
    assert movie["title"] == "Alien"
    assert movie["tags"] == []
    assert "_id" not in movie
    assert "__v" not in movie
    assert "createdAt" in movie and "updatedAt" in movie


async def test_get_by_id(movies):
    created = await movies.create({"title": "Heat"})

    fetched = await movies.get_by_id(created["id"])

    assert fetched is not None
    assert fetched["id"] == created["id"]
    assert fetched["title"] == "Heat"


@pytest.mark.parametrize("missing_id", [str(ObjectId()), "not-an-object-id"])
async def test_not_found_is_none_for_every_operation(repos, missing_id):
    for service in (repos.movies, repos.sections, repos.screen_configurations.service):
        assert await service.get_by_id(missing_id) is None
        assert await service.update(missing_id, {"title": "x"}) is None
        assert await service.delete(missing_id) is None


async def test_update_merges_fields(movies):
    created = await movies.create({"title": "Heat", "description": "LA crime", "tags": ["crime"]})

    updated = await movies.update(created["id"], {"title": "Heat (1995)"})

    assert updated["title"] == "Heat (1995)"
    assert updated["description"] == "LA crime"
    assert updated["tags"] == ["crime"]


async def test_delete_returns_snapshot_then_gone(movies):
    created = await movies.create({"title": "Gone"})

    deleted = await movies.delete(created["id"])

    assert deleted["id"] == created["id"]
    assert deleted["title"] == "Gone"
    assert await movies.get_by_id(created["id"]) is None


async def test_get_many_filters_and_sorts(movies):
    await movies.create({"title": "Alien", "tags": ["sci-fi"]})
    await movies.create({"title": "Aliens", "tags": ["sci-fi", "action"]})
    await movies.create({"title": "Heat", "tags": ["crime"]})

    result = await movies.get_many(
        QueryOptions(
            filters=[Filter("title", FilterOperator.CONTAINS, "ALIEN")],
            sort=[SortOption("title", SortOrder.DESC)],
        )
    )

    assert [m["title"] for m in result] == ["Aliens", "Alien"]


async def test_get_many_by_ids(movies):
    first = await movies.create({"title": "One"})
    await movies.create({"title": "Two"})

    result = await movies.get_many(QueryOptions(ids=[first["id"]]))

    assert [m["id"] for m in result] == [first["id"]]


async def test_get_many_in_filter(movies):
    await movies.create({"title": "Alien", "tags": ["sci-fi"]})
    await movies.create({"title": "Heat", "tags": ["crime"]})

    result = await movies.get_many(QueryOptions(filters=[Filter("tags", FilterOperator.IN, ["crime", "drama"])]))

    assert [m["title"] for m in result] == ["Heat"]


async def test_get_many_no_match_is_empty_list(movies):
    await movies.create({"title": "Alien"})

    result = await movies.get_many(QueryOptions(filters=[Filter("title", FilterOperator.EQ, "Nope")]))

    assert result == []


async def test_get_many_without_options(movies):
    await movies.create({"title": "Alien"})

    assert len(await movies.get_many()) == 1


async def test_custom_operations_replace_defaults(repos):
    custom_get_by_id = AsyncMock(return_value={"id": "custom"})

    service = create_crud_service(
        model=repos.models.movie,
        entity_name="Movie",
        custom_get_by_id=custom_get_by_id,
    )

    assert await service.get_by_id("anything") == {"id": "custom"}
    custom_get_by_id.assert_awaited_once_with("anything")
    assert await service.get_many() == []


async def test_storage_failures_propagate(repos, monkeypatch):
    model = repos.models.movie
    monkeypatch.setattr(model, "find", AsyncMock(side_effect=ConnectionError("db down")))
    service = create_crud_service(model=model, entity_name="Movie")

    with pytest.raises(ConnectionError, match="db down"):
        await service.get_many()


async def test_validation_errors_propagate(repos):
    with pytest.raises(DocumentValidationError):
        await repos.sections.create({"title": "Bad", "type": "NotAType"})
