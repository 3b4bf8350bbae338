"""IBGE Aggregates Client: fetches the fixed PNAD Contínua aggregate (table 6397).

Invariants:
    - One GET per call, fixed URL and query, no retry, no caching
    - 2xx: decoded JSON returned untouched
    - Non-2xx: UpstreamError with the upstream status
    - Network failure or undecodable body: TransportError
"""

import logging
from typing import Any

import httpx

from painel.core.errors import TransportError, UpstreamError

logger = logging.getLogger(__name__)

AGGREGATE_6397_URL = (
    "https://servicodados.ibge.gov.br/api/v3/agregados/6397"
    "/periodos/all/variaveis/all?localidades=N1[1]"
)


class IbgeClient:
    """Fetches the statistics-agency aggregate used by the dashboard."""

    def __init__(self, url: str = AGGREGATE_6397_URL, timeout_seconds: float = 30.0):
        self.url = url
        self.timeout_seconds = timeout_seconds

    async def fetch_aggregate(self) -> Any:
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout_seconds, follow_redirects=True,
            ) as client:
                response = await client.get(
                    self.url, headers={"Cache-Control": "no-store"},
                )
        except httpx.HTTPError as e:
            raise TransportError("IBGE request error", "ibge") from e

        if not response.is_success:
            logger.warning(
                "[IBGE] upstream returned non-success status",
                extra={"upstream_status": response.status_code},
            )
            raise UpstreamError(response.status_code)

        try:
            return response.json()
        except ValueError as e:
            raise TransportError("IBGE request error", "ibge") from e
