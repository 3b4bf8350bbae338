"""Gemini Explanation: POST /api/gemini -> {text}.

Invariants:
    - Missing body is the same as {} (default task, empty context)
    - Quota exhaustion still answers 200 with the canned explanation
"""

from fastapi import APIRouter, Depends

from painel.api.dependencies import get_gemini_client, get_quota_classifier
from painel.core.quota import QuotaClassifier
from painel.infrastructure.gemini_client import GeminiClient
from painel.schemas.gemini import ExplainRequest, ExplainResponse
from painel.services.explanation import explain

router = APIRouter(prefix="/api", tags=["gemini"])


@router.post("/gemini", response_model=ExplainResponse)
async def gemini_explain(
    body: ExplainRequest | None = None,
    client: GeminiClient = Depends(get_gemini_client),
    classifier: QuotaClassifier = Depends(get_quota_classifier),
):
    body = body or ExplainRequest()
    text = await explain(client, classifier, body.prompt, body.context)
    return ExplainResponse(text=text)
