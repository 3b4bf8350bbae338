"""Root conftest: shared test configuration and outbound HTTP mocking."""

import os

import pytest
import respx

# Ensure tests don't accidentally use a real API key or a developer .env value
os.environ["GEMINI_API_KEY"] = ""
os.environ.setdefault("LOG_FORMAT", "text")


@pytest.fixture
def upstream():
    """respx router intercepting every outbound httpx call.

    Unmatched requests fail the test instead of reaching the network.
    """
    with respx.mock(assert_all_called=False) as router:
        yield router


def gemini_reply(*texts: str) -> dict:
    """generateContent success body with one candidate made of `texts` parts."""
    return {
        "candidates": [
            {"content": {"role": "model", "parts": [{"text": t} for t in texts]}},
        ],
    }


@pytest.fixture
def gemini_body():
    return gemini_reply
