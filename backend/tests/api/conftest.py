"""Route test fixtures: ASGI test client with clients pointed at fake hosts.

Invariants:
    - Gemini calls go to https://gemini.test/v1beta with key TEST_KEY
    - IBGE calls go to https://ibge.test/agregados/6397
    - Overrides are cleared after every test
"""

import pytest
from httpx import ASGITransport, AsyncClient

from painel.api.dependencies import get_gemini_client, get_ibge_client
from painel.infrastructure.gemini_client import GeminiClient
from painel.infrastructure.ibge_client import IbgeClient
from painel.main import app

TEST_KEY = "AIzaSyTEST-key-0123456789"


def _override_clients(target, api_key=TEST_KEY):
    target.dependency_overrides[get_gemini_client] = lambda: GeminiClient(
        api_key=api_key, base_url="https://gemini.test/v1beta",
    )
    target.dependency_overrides[get_ibge_client] = lambda: IbgeClient(
        url="https://ibge.test/agregados/6397",
    )


@pytest.fixture
def override_clients():
    """Apply the fake-host client overrides to any app (e.g. serverless ones)."""
    touched = []

    def _apply(target, api_key=TEST_KEY):
        _override_clients(target, api_key)
        touched.append(target)
        return target

    yield _apply
    for target in touched:
        target.dependency_overrides.clear()


@pytest.fixture
async def client(override_clients):
    """FastAPI test client for the standalone app."""
    override_clients(app)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def keyless_client(override_clients):
    """Standalone app with no Gemini key configured."""
    override_clients(app, api_key=None)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
