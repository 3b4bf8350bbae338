"""Liveness route tests: /api/health and /api/ping."""

import pytest


@pytest.mark.parametrize("path", ["/api/health", "/api/ping"])
async def test_get_reports_ok_and_uptime(client, path):
    response = await client.get(path)
    assert response.status_code == 200
    body = response.json()
    assert body["ok"] is True
    assert isinstance(body["uptime"], (int, float))
    assert body["uptime"] >= 0


@pytest.mark.parametrize("method", ["POST", "PUT", "DELETE", "PATCH"])
@pytest.mark.parametrize("path", ["/api/health", "/api/ping"])
async def test_other_methods_are_405_with_allow(client, path, method):
    response = await client.request(method, path)
    assert response.status_code == 405
    assert "GET" in response.headers["allow"]
    assert response.json() == {"error": "Method Not Allowed"}
