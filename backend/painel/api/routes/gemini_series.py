"""Gemini Series: POST /api/gemini-series -> list of chart series.

Invariants:
    - Missing body is the same as {} (12 months ending this month)
    - Quota exhaustion and malformed model output both answer 200 with
      synthetic series; only unexpected failures surface as errors
"""

from fastapi import APIRouter, Depends

from painel.api.dependencies import get_gemini_client, get_quota_classifier
from painel.core.quota import QuotaClassifier
from painel.infrastructure.gemini_client import GeminiClient
from painel.schemas.gemini import SeriesRequest
from painel.services.series_generation import generate_series

router = APIRouter(prefix="/api", tags=["gemini"])


@router.post("/gemini-series")
async def gemini_series(
    body: SeriesRequest | None = None,
    client: GeminiClient = Depends(get_gemini_client),
    classifier: QuotaClassifier = Depends(get_quota_classifier),
) -> list:
    body = body or SeriesRequest()
    return await generate_series(client, classifier, body.months, body.end)
