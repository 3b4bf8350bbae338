"""Provider Status: probes Gemini's model listing and reports key/reachability.

Invariants:
    - Never generates content; one GET /models at most
    - Returns (http_status, ProviderStatus): 200 reachable, 502 provider said
      no, 500 when no key is configured or the probe failed in transit
    - message holds at most PROBE_MESSAGE_LIMIT characters of the provider body
"""

import logging

from painel.infrastructure.gemini_client import GeminiClient
from painel.schemas.status import ProviderStatus

logger = logging.getLogger(__name__)

PROBE_MESSAGE_LIMIT = 300


async def check_provider_status(client: GeminiClient) -> tuple[int, ProviderStatus]:
    status = ProviderStatus(has_key=client.has_key, masked_key=client.masked_key)
    try:
        probe = await client.probe_models()
    except Exception as e:
        logger.warning(f"[Gemini-status] probe failed: {e}")
        status.message = getattr(e, "message", None) or str(e)
        return 500, status

    status.http_status = probe.status_code
    status.reachable = probe.ok
    if not probe.ok:
        status.message = probe.body[:PROBE_MESSAGE_LIMIT] or None
        return 502, status
    return 200, status
