"""Per-function app tests: same behavior as the standalone routes."""

import httpx
from httpx import ASGITransport, AsyncClient

from painel.core.prompts import QUOTA_FALLBACK_TEXT
from painel.serverless import (
    gemini_app, gemini_series_app, gemini_status_app, ibge_app, ping_app,
)


def _client_for(app):
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


async def test_ping_app():
    async with _client_for(ping_app) as c:
        response = await c.get("/api/ping")
        rejected = await c.post("/api/ping")
    assert response.json()["ok"] is True
    assert rejected.status_code == 405
    assert rejected.headers["allow"] == "GET"


async def test_function_app_only_serves_its_route():
    async with _client_for(ping_app) as c:
        response = await c.get("/api/ibge/6397")
    assert response.status_code == 404


async def test_ibge_app_mirrors_upstream_status(override_clients, upstream):
    override_clients(ibge_app)
    upstream.get(host="ibge.test", path="/agregados/6397").mock(
        return_value=httpx.Response(502),
    )
    async with _client_for(ibge_app) as c:
        response = await c.get("/api/ibge-6397")
    assert response.status_code == 502


async def test_gemini_app_quota_fallback(override_clients, upstream):
    override_clients(gemini_app)
    upstream.post(host="gemini.test").mock(
        return_value=httpx.Response(429, json={"error": {"message": "Quota exceeded"}}),
    )
    async with _client_for(gemini_app) as c:
        response = await c.post("/api/gemini", json={"prompt": "x"})
    assert response.status_code == 200
    assert response.json() == {"text": QUOTA_FALLBACK_TEXT}


async def test_gemini_series_app_falls_back_on_garbage(override_clients, upstream, gemini_body):
    override_clients(gemini_series_app)
    upstream.post(host="gemini.test").mock(
        return_value=httpx.Response(200, json=gemini_body("sem json")),
    )
    async with _client_for(gemini_series_app) as c:
        response = await c.post("/api/gemini-series", json={"months": 4, "end": "2024-02-10"})
    assert response.status_code == 200
    assert list(response.json()[1]["results"][0]["series"]) == [
        "2023-11", "2023-12", "2024-01", "2024-02",
    ]


async def test_gemini_status_app_without_key(override_clients):
    override_clients(gemini_status_app, api_key=None)
    async with _client_for(gemini_status_app) as c:
        response = await c.get("/api/gemini-status")
    assert response.status_code == 500
    assert response.json()["hasKey"] is False
