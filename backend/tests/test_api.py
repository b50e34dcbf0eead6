from datetime import datetime, timezone

import pytest
from httpx import ASGITransport, AsyncClient

from pixel_design.schemas import DesignOut


def client_for(app):
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


@pytest.mark.asyncio
async def test_health_check(app):
    async with client_for(app) as ac:
        resp = await ac.get("/api/health")
    assert resp.status_code == 200
    assert resp.json() == {"ok": True}


@pytest.mark.asyncio
async def test_startup_design_is_blank_16_grid(app):
    async with client_for(app) as ac:
        resp = await ac.get("/api/design")
    assert resp.status_code == 200
    data = resp.json()
    assert data["gridSize"] == 16
    assert data["pixels"] == ["#000000"] * 256
    assert isinstance(data["updatedAt"], str)
    DesignOut.model_validate(data)


@pytest.mark.asyncio
async def test_post_then_get_returns_saved_design(app):
    pixels = ["#fff", "#000", "#fff", "#000"]
    started = datetime.now(timezone.utc).replace(microsecond=0)
    async with client_for(app) as ac:
        resp = await ac.post("/api/design", json={"gridSize": 2, "pixels": pixels})
        assert resp.status_code == 200
        body = resp.json()
        assert body["ok"] is True
        assert body["savedDesign"]["gridSize"] == 2
        assert body["savedDesign"]["pixels"] == pixels

        resp = await ac.get("/api/design")
    assert resp.json() == body["savedDesign"]
    fetched = DesignOut.model_validate(resp.json())
    assert fetched.updatedAt >= started


@pytest.mark.asyncio
async def test_length_mismatch_is_rejected(app):
    async with client_for(app) as ac:
        before = (await ac.get("/api/design")).json()
        resp = await ac.post("/api/design", json={"gridSize": 2, "pixels": ["#fff"]})
        assert resp.status_code == 400
        assert resp.json() == {"error": "Pixels array must be 4 items for gridSize 2"}
        after = (await ac.get("/api/design")).json()
    assert after == before


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {"gridSize": "2", "pixels": []},
        {"pixels": ["#fff"]},
        {"gridSize": 1},
        {"gridSize": 1, "pixels": "#fff"},
        {},
    ],
)
async def test_invalid_payload_is_rejected(app, payload):
    async with client_for(app) as ac:
        before = (await ac.get("/api/design")).json()
        resp = await ac.post("/api/design", json=payload)
        assert resp.status_code == 400
        assert resp.json() == {"error": "Invalid payload"}
        after = (await ac.get("/api/design")).json()
    assert after == before


@pytest.mark.asyncio
@pytest.mark.parametrize("content", [b"[1, 2, 3]", b"not json", b""])
async def test_non_object_body_is_invalid_payload(app, content):
    async with client_for(app) as ac:
        resp = await ac.post(
            "/api/design", content=content, headers={"Content-Type": "application/json"}
        )
    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid payload"}


@pytest.mark.asyncio
async def test_same_payload_twice_is_stable(app):
    payload = {"gridSize": 1, "pixels": ["#ff0000"]}
    async with client_for(app) as ac:
        await ac.post("/api/design", json=payload)
        first = DesignOut.model_validate((await ac.get("/api/design")).json())
        await ac.post("/api/design", json=payload)
        second = DesignOut.model_validate((await ac.get("/api/design")).json())
    assert (first.gridSize, first.pixels) == (second.gridSize, second.pixels)
    assert second.updatedAt >= first.updatedAt


@pytest.mark.asyncio
async def test_extra_fields_are_ignored(app):
    payload = {"gridSize": 1, "pixels": ["#fff"], "updatedAt": "1999-01-01T00:00:00Z"}
    async with client_for(app) as ac:
        resp = await ac.post("/api/design", json=payload)
    assert resp.status_code == 200
    saved = DesignOut.model_validate(resp.json()["savedDesign"])
    assert saved.updatedAt.year != 1999


@pytest.mark.asyncio
async def test_huge_grid_size_is_invalid_payload(app):
    content = ('{"gridSize": ' + "9" * 2200 + ', "pixels": []}').encode()
    async with client_for(app) as ac:
        before = (await ac.get("/api/design")).json()
        resp = await ac.post(
            "/api/design", content=content, headers={"Content-Type": "application/json"}
        )
        assert resp.status_code == 400
        assert resp.json() == {"error": "Invalid payload"}
        after = (await ac.get("/api/design")).json()
    assert after == before
