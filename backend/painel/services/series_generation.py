"""Structured Series Generation: Gemini-generated chart series with synthetic fallback.

Invariants:
    - The reference month is resolved once (end or UTC today) and shared by the
      prompt and every fallback, so fallback output matches build_synthetic_series(months, end)
    - Quota-classified generation failure: fallback, no sanitation attempted
    - Unusable model output (ParseError): fallback
    - A valid `series` list is returned verbatim
    - Any other generation failure becomes GenerationError
      "Gemini series request error" with the cause as detail
"""

import logging
from datetime import date, datetime, timezone

from painel.core.errors import GenerationError, ParseError
from painel.core.prompts import build_series_prompt
from painel.core.quota import QuotaClassifier
from painel.core.series_parsing import parse_series_payload
from painel.core.synthetic_series import build_synthetic_series
from painel.infrastructure.gemini_client import GeminiClient

logger = logging.getLogger(__name__)


async def generate_series(
    client: GeminiClient,
    classifier: QuotaClassifier,
    months: int = 12,
    end: date | None = None,
) -> list:
    """Return chart series from Gemini, or the synthetic fallback."""
    reference = end or datetime.now(timezone.utc).date()
    prompt = build_series_prompt(months, reference)

    try:
        text = await client.generate_text(prompt)
    except Exception as e:
        logger.error(f"[Gemini-series] request error: {e}", extra={"months": months})
        if classifier.is_quota_failure(e):
            return build_synthetic_series(months, reference)
        raise GenerationError("Gemini series request error", str(e)) from e

    try:
        return parse_series_payload(text)
    except ParseError as e:
        logger.warning(
            f"[Gemini-series] {e.message}, serving synthetic series",
            extra={"months": months},
        )
        return build_synthetic_series(months, reference)
