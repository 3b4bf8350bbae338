"""Text Explanation: free-text Gemini explanation with a canned quota fallback.

Invariants:
    - Exactly one generateContent call per request
    - Quota-classified failure: returns QUOTA_FALLBACK_TEXT (caller answers 200)
    - Empty model text: EmptyProviderResponseError (502)
    - Any other failure (missing key, provider status, transport, unexpected)
      becomes GenerationError "Gemini request error" with the cause as detail
"""

import logging

from painel.core.errors import EmptyProviderResponseError, GenerationError
from painel.core.prompts import QUOTA_FALLBACK_TEXT, build_explain_prompt
from painel.core.quota import QuotaClassifier
from painel.infrastructure.gemini_client import GeminiClient

logger = logging.getLogger(__name__)


async def explain(
    client: GeminiClient,
    classifier: QuotaClassifier,
    prompt: str | None = None,
    context: str | None = None,
) -> str:
    """Ask Gemini to explain dashboard data; degrade to canned text on quota."""
    final_prompt = build_explain_prompt(prompt, context)
    try:
        text = await client.generate_text(final_prompt)
    except Exception as e:
        logger.error(f"[Gemini] request error: {e}")
        if classifier.is_quota_failure(e):
            logger.warning("[Gemini] quota exhausted, serving canned explanation")
            return QUOTA_FALLBACK_TEXT
        raise GenerationError("Gemini request error", str(e)) from e

    if not text:
        logger.error("[Gemini] Empty response or blocked by safety.")
        raise EmptyProviderResponseError()
    return text
