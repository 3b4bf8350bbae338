"""Service test fixtures: controllable fake Gemini client.

Invariants:
    - make_gemini(text=..., error=..., probe=...) builds a fresh fake per test
    - The fake records every prompt it receives in `.prompts`
"""

import pytest

from painel.core.quota import QuotaClassifier
from painel.infrastructure.gemini_client import ModelsProbe, mask_api_key


class FakeGeminiClient:
    """Stands in for GeminiClient at the service boundary."""

    def __init__(self, text="", error=None, probe=None, api_key="AIzaSyFAKE-0000-1234"):
        self.text = text
        self.error = error
        self.probe = probe
        self.api_key = api_key
        self.prompts = []

    @property
    def has_key(self):
        return bool(self.api_key)

    @property
    def masked_key(self):
        return mask_api_key(self.api_key)

    async def generate_text(self, prompt, model=None):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.text

    async def probe_models(self):
        if self.error is not None:
            raise self.error
        return self.probe or ModelsProbe(status_code=200, body="{}")


@pytest.fixture
def make_gemini():
    return FakeGeminiClient


@pytest.fixture
def classifier():
    return QuotaClassifier()
