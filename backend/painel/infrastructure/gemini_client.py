"""Gemini REST Client: one generateContent call per request, mapped to typed errors.

Invariants:
    - Credential and endpoint are injected at construction, never read ad hoc
    - Missing credential: ConfigurationError before any network IO
    - Non-2xx: ProviderError carrying the provider message (or "HTTP <status>")
    - Connect/read/timeout failures: TransportError
    - Exactly one attempt per call, no retry

Design Decisions:
    - Plain REST over httpx instead of an SDK: the only calls are generateContent
      and the model listing used by the status probe
    - Short-lived AsyncClient per call: no connection state shared across requests
"""

import logging
from dataclasses import dataclass

import httpx

from painel.core.errors import ConfigurationError, ProviderError, TransportError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-1.5-flash"


@dataclass
class ModelsProbe:
    """Outcome of GET /models: status code and raw body text."""
    status_code: int
    body: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


def mask_api_key(key: str | None) -> str | None:
    """First six and last four characters, e.g. "AIzaSy...9xQk"."""
    if not key:
        return None
    return f"{key[:6]}...{key[-4:]}"


def extract_candidate_text(data: dict) -> str:
    """Join the text parts of the first candidate with spaces, trimmed."""
    candidates = data.get("candidates") or []
    if not candidates or not isinstance(candidates[0], dict):
        return ""
    parts = (candidates[0].get("content") or {}).get("parts") or []
    texts = [
        (p.get("text") or "") if isinstance(p, dict) else ""
        for p in parts
    ]
    return " ".join(texts).strip()


def _error_detail(response: httpx.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        data = {}
    error = data.get("error") if isinstance(data, dict) else None
    message = error.get("message") if isinstance(error, dict) else None
    return message or f"HTTP {response.status_code}"


class GeminiClient:
    """Thin async wrapper over the generative-language REST API."""

    def __init__(
        self,
        api_key: str | None,
        base_url: str = DEFAULT_BASE_URL,
        model: str = DEFAULT_MODEL,
        timeout_seconds: float = 60.0,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.timeout_seconds = timeout_seconds

    @property
    def has_key(self) -> bool:
        return bool(self.api_key)

    @property
    def masked_key(self) -> str | None:
        return mask_api_key(self.api_key)

    def _require_key(self) -> str:
        if not self.api_key:
            raise ConfigurationError(
                "GEMINI_API_KEY not configured", "GEMINI_API_KEY",
            )
        return self.api_key

    async def generate_text(self, prompt: str, model: str | None = None) -> str:
        """Send one user prompt and return the first candidate's text."""
        key = self._require_key()
        model = model or self.model
        url = f"{self.base_url}/models/{model}:generateContent"
        body = {
            "contents": [
                {"role": "user", "parts": [{"text": str(prompt or "")}]},
            ],
        }
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout_seconds, follow_redirects=True,
            ) as client:
                response = await client.post(url, params={"key": key}, json=body)
        except httpx.HTTPError as e:
            raise TransportError(
                f"Gemini request failed: {e}", "gemini",
            ) from e

        if not response.is_success:
            raise ProviderError(
                f"Gemini REST error: {_error_detail(response)}",
                provider_status=response.status_code,
            )

        try:
            data = response.json()
        except ValueError:
            data = {}
        text = extract_candidate_text(data if isinstance(data, dict) else {})
        logger.info(
            "Gemini generateContent success",
            extra={"model": model},
        )
        return text

    async def probe_models(self) -> ModelsProbe:
        """List models without generating anything (status check)."""
        key = self._require_key()
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout_seconds, follow_redirects=True,
            ) as client:
                response = await client.get(
                    f"{self.base_url}/models", params={"key": key},
                )
        except httpx.HTTPError as e:
            raise TransportError(
                f"Gemini models probe failed: {e}", "gemini",
            ) from e
        return ModelsProbe(status_code=response.status_code, body=response.text)
