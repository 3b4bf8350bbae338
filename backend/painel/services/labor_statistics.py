"""Labor Statistics Proxy: passes the IBGE 6397 aggregate through unmodified."""

import logging
from typing import Any

from painel.core.errors import TransportError
from painel.infrastructure.ibge_client import IbgeClient

logger = logging.getLogger(__name__)


async def fetch_labor_aggregate(client: IbgeClient) -> Any:
    """Upstream JSON on success; UpstreamError/TransportError otherwise."""
    try:
        return await client.fetch_aggregate()
    except TransportError as e:
        logger.error(f"[IBGE] request error: {e.__cause__ or e}")
        raise
