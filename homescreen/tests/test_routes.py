"""Integration tests for the CRUD, screen and health routes."""

from __future__ import annotations

import pytest

pytestmark = pytest.mark.asyncio(loop_scope="session")


async def _create(async_client, path: str, body: dict) -> dict:
    res = await async_client.post(path, json=body)
    assert res.status_code == 201, res.text
    return res.json()


# ── movie CRUD routes ───────────────────────────────────────────────────────


class TestMovieRoutes:
    """Tests for /api/movies endpoints."""

    async def test_create_movie(self, async_client):
        """POST /api/movies → 201 with the stored movie."""
        res = await async_client.post("/api/movies", json={"title": "Alien", "tags": ["sci-fi"]})
        assert res.status_code == 201
        data = res.json()
        assert data["title"] == "Alien"
        assert data["tags"] == ["sci-fi"]
        assert "id" in data
        assert "_id" not in data
        assert "__v" not in data
        assert "createdAt" in data and "updatedAt" in data

    async def test_get_movie(self, async_client):
        """GET /api/movies/{id} → 200."""
        movie = await _create(async_client, "/api/movies", {"title": "Heat"})
        res = await async_client.get(f"/api/movies/{movie['id']}")
        assert res.status_code == 200
        assert res.json()["title"] == "Heat"

    async def test_get_missing_movie(self, async_client):
        """GET /api/movies/{unknown} → 404 error body."""
        res = await async_client.get("/api/movies/5f0000000000000000000000")
        assert res.status_code == 404
        assert res.json() == {"success": False, "error": "Movie not found"}

    async def test_get_malformed_id(self, async_client):
        """A malformed id is simply not found."""
        res = await async_client.get("/api/movies/not-an-id")
        assert res.status_code == 404

    async def test_list_movies(self, async_client):
        """GET /api/movies with no params → every movie."""
        await _create(async_client, "/api/movies", {"title": "First"})
        await _create(async_client, "/api/movies", {"title": "Second"})
        res = await async_client.get("/api/movies")
        assert res.status_code == 200
        assert sorted(m["title"] for m in res.json()) == ["First", "Second"]

    async def test_list_movies_like_filter(self, async_client):
        """title_like is a case-insensitive substring match."""
        await _create(async_client, "/api/movies", {"title": "Alien"})
        await _create(async_client, "/api/movies", {"title": "Aliens"})
        await _create(async_client, "/api/movies", {"title": "Heat"})
        res = await async_client.get("/api/movies", params={"title_like": "ALI"})
        assert sorted(m["title"] for m in res.json()) == ["Alien", "Aliens"]

    async def test_list_movies_sorted(self, async_client):
        """_sort/_order control ordering."""
        for title in ("b", "c", "a"):
            await _create(async_client, "/api/movies", {"title": title})
        res = await async_client.get("/api/movies", params={"_sort": "title", "_order": "asc"})
        assert [m["title"] for m in res.json()] == ["a", "b", "c"]

    async def test_list_movies_by_ids(self, async_client):
        """Repeated id params select those documents."""
        a = await _create(async_client, "/api/movies", {"title": "a"})
        await _create(async_client, "/api/movies", {"title": "b"})
        c = await _create(async_client, "/api/movies", {"title": "c"})
        res = await async_client.get("/api/movies", params=[("id", a["id"]), ("id", c["id"])])
        assert sorted(m["id"] for m in res.json()) == sorted([a["id"], c["id"]])

    async def test_list_ignores_underscore_params(self, async_client):
        """Unknown _-prefixed params are not treated as filters."""
        await _create(async_client, "/api/movies", {"title": "a"})
        res = await async_client.get("/api/movies", params={"_page": "2"})
        assert len(res.json()) == 1

    async def test_update_movie(self, async_client):
        """PUT /api/movies/{id} → 200 with merged document."""
        movie = await _create(async_client, "/api/movies", {"title": "Old", "poster": "p.jpg"})
        res = await async_client.put(f"/api/movies/{movie['id']}", json={"title": "New"})
        assert res.status_code == 200
        assert res.json()["title"] == "New"
        assert res.json()["poster"] == "p.jpg"

    async def test_patch_is_alias_of_put(self, async_client):
        """PATCH /api/movies/{id} behaves like PUT."""
        movie = await _create(async_client, "/api/movies", {"title": "Old"})
        res = await async_client.patch(f"/api/movies/{movie['id']}", json={"title": "Patched"})
        assert res.status_code == 200
        assert res.json()["title"] == "Patched"

    async def test_update_missing_movie(self, async_client):
        """PUT on an unknown id → 404."""
        res = await async_client.put("/api/movies/5f0000000000000000000000", json={"title": "x"})
        assert res.status_code == 404
        assert res.json()["error"] == "Movie not found"

    async def test_delete_movie(self, async_client):
        """DELETE /api/movies/{id} → {"id": id}, then 404."""
        movie = await _create(async_client, "/api/movies", {"title": "Gone"})
        res = await async_client.delete(f"/api/movies/{movie['id']}")
        assert res.status_code == 200
        assert res.json() == {"id": movie["id"]}
        res = await async_client.get(f"/api/movies/{movie['id']}")
        assert res.status_code == 404

    async def test_delete_missing_movie(self, async_client):
        """DELETE on an unknown id → 404."""
        res = await async_client.delete("/api/movies/5f0000000000000000000000")
        assert res.status_code == 404

    async def test_create_with_non_object_body(self, async_client):
        """A JSON array body → 400."""
        res = await async_client.post("/api/movies", json=["nope"])
        assert res.status_code == 400
        assert res.json()["success"] is False


# ── section routes ──────────────────────────────────────────────────────────


class TestSectionRoutes:
    """Tests for /api/sections endpoints."""

    async def test_hero_slider_keeps_items(self, async_client):
        """HeroSlider sections store their movie ids."""
        section = await _create(
            async_client, "/api/sections", {"title": "Featured", "type": "HeroSlider", "items": ["m1", "m2"]}
        )
        assert section["items"] == ["m1", "m2"]

    async def test_other_types_drop_items(self, async_client):
        """Non-HeroSlider sections never keep items."""
        section = await _create(async_client, "/api/sections", {"title": "Top", "type": "TopChart", "items": ["m1"]})
        assert section["items"] == []

    async def test_invalid_section_type(self, async_client):
        """An unknown type → 400."""
        res = await async_client.post("/api/sections", json={"title": "Bad", "type": "Carousel"})
        assert res.status_code == 400
        assert res.json()["success"] is False

    async def test_filter_by_type(self, async_client):
        """type=<value> filters by equality."""
        await _create(async_client, "/api/sections", {"title": "A", "type": "TopChart"})
        await _create(async_client, "/api/sections", {"title": "B", "type": "MostPopular"})
        res = await async_client.get("/api/sections", params={"type": "MostPopular"})
        assert [s["title"] for s in res.json()] == ["B"]

    async def test_filter_type_in(self, async_client):
        """Repeated type_in params match any listed value."""
        await _create(async_client, "/api/sections", {"title": "A", "type": "TopChart"})
        await _create(async_client, "/api/sections", {"title": "B", "type": "MostPopular"})
        await _create(async_client, "/api/sections", {"title": "C", "type": "ContinueWatching"})
        res = await async_client.get(
            "/api/sections", params=[("type_in", "TopChart"), ("type_in", "ContinueWatching")]
        )
        assert sorted(s["title"] for s in res.json()) == ["A", "C"]


# ── screen configuration and active screen routes ───────────────────────────


class TestScreenRoutes:
    """Tests for /api/screen-configurations and /api/screen."""

    async def _configuration(self, async_client) -> tuple[dict, dict]:
        movie = await _create(async_client, "/api/movies", {"title": "Alien"})
        section = await _create(
            async_client, "/api/sections", {"title": "Featured", "type": "HeroSlider", "items": [movie["id"]]}
        )
        config = await _create(
            async_client, "/api/screen-configurations", {"name": "Default", "sections": [section["id"]]}
        )
        return movie, config

    async def test_get_configuration_populated(self, async_client):
        """GET /api/screen-configurations/{id} inlines sections and movies."""
        movie, config = await self._configuration(async_client)
        res = await async_client.get(f"/api/screen-configurations/{config['id']}")
        assert res.status_code == 200
        section = res.json()["sections"][0]
        assert section["title"] == "Featured"
        assert section["items"][0]["id"] == movie["id"]

    async def test_missing_configuration(self, async_client):
        """Unknown configuration → 404 with the resource name."""
        res = await async_client.get("/api/screen-configurations/5f0000000000000000000000")
        assert res.status_code == 404
        assert res.json()["error"] == "ScreenConfiguration not found"

    async def test_set_active_requires_id(self, async_client):
        """POST set-active without id → 400."""
        res = await async_client.post("/api/screen-configurations/set-active", json={})
        assert res.status_code == 400
        assert res.json()["error"] == "Configuration ID is required in request body"

    async def test_set_active_unknown(self, async_client):
        """POST set-active with unknown id → 404."""
        res = await async_client.post(
            "/api/screen-configurations/set-active", json={"id": "5f0000000000000000000000"}
        )
        assert res.status_code == 404

    async def test_set_active(self, async_client):
        """POST set-active → 200 with the configuration."""
        _, config = await self._configuration(async_client)
        res = await async_client.post("/api/screen-configurations/set-active", json={"id": config["id"]})
        assert res.status_code == 200
        assert res.json()["id"] == config["id"]
        assert res.json()["name"] == "Default"

    async def test_active_screen_not_set(self, async_client):
        """GET /api/screen before any set → 404."""
        res = await async_client.get("/api/screen")
        assert res.status_code == 404
        assert res.json()["success"] is False
        assert "/api/screen/set" in res.json()["error"]

    async def test_screen_set_then_get(self, async_client):
        """POST /api/screen/set → {id, name}; GET /api/screen → populated."""
        movie, config = await self._configuration(async_client)
        res = await async_client.post("/api/screen/set", json={"id": config["id"]})
        assert res.status_code == 200
        assert res.json() == {"id": config["id"], "name": "Default"}

        res = await async_client.get("/api/screen")
        assert res.status_code == 200
        data = res.json()
        assert data["id"] == config["id"]
        assert data["sections"][0]["items"][0]["title"] == movie["title"]

    async def test_screen_set_requires_id(self, async_client):
        """POST /api/screen/set without id → 400."""
        res = await async_client.post("/api/screen/set", json={})
        assert res.status_code == 400

    async def test_screen_set_unknown(self, async_client):
        """POST /api/screen/set with unknown id → 404."""
        res = await async_client.post("/api/screen/set", json={"id": "5f0000000000000000000000"})
        assert res.status_code == 404
        assert res.json()["error"] == "Screen configuration not found"


async def test_health(async_client):
    """GET /health → ok."""
    res = await async_client.get("/health")
    assert res.status_code == 200
    assert res.json() == {"status": "ok"}


async def test_unknown_route(async_client):
    """Unknown paths use the error shape."""
    res = await async_client.get("/api/nothing-here")
    assert res.status_code == 404
    assert res.json()["success"] is False
