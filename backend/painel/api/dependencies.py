"""Route Dependencies: process-wide clients built once from settings.

Invariants:
    - Clients are stateless (one short-lived httpx client per call), so one
      instance per process is safe under concurrent requests
    - Tests replace these through app.dependency_overrides, never by patching settings
"""

from painel.config import get_settings
from painel.core.quota import QuotaClassifier
from painel.infrastructure.gemini_client import GeminiClient
from painel.infrastructure.ibge_client import IbgeClient

_gemini_client: GeminiClient | None = None
_ibge_client: IbgeClient | None = None
_quota_classifier: QuotaClassifier | None = None


def get_gemini_client() -> GeminiClient:
    global _gemini_client
    if _gemini_client is None:
        settings = get_settings()
        _gemini_client = GeminiClient(
            api_key=settings.gemini_api_key,
            base_url=settings.gemini_base_url,
            model=settings.gemini_model,
            timeout_seconds=settings.gemini_timeout_seconds,
        )
    return _gemini_client


def get_ibge_client() -> IbgeClient:
    global _ibge_client
    if _ibge_client is None:
        settings = get_settings()
        _ibge_client = IbgeClient(
            url=settings.ibge_aggregate_url,
            timeout_seconds=settings.ibge_timeout_seconds,
        )
    return _ibge_client


def get_quota_classifier() -> QuotaClassifier:
    global _quota_classifier
    if _quota_classifier is None:
        _quota_classifier = QuotaClassifier(get_settings().quota_error_patterns)
    return _quota_classifier
