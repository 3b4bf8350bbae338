"""IbgeClient tests: pass-through payload, status mirroring, transport failures."""

import httpx
import pytest

from painel.core.errors import TransportError, UpstreamError
from painel.infrastructure.ibge_client import IbgeClient

URL = "https://ibge.test/agregados/6397"


async def test_returns_decoded_payload_untouched(upstream):
    payload = [{"id": "4099", "variavel": "Taxa de desocupação", "resultados": []}]
    upstream.get(host="ibge.test", path="/agregados/6397").mock(
        return_value=httpx.Response(200, json=payload),
    )
    assert await IbgeClient(url=URL).fetch_aggregate() == payload


async def test_non_success_status_raises_upstream_error(upstream):
    upstream.get(host="ibge.test", path="/agregados/6397").mock(
        return_value=httpx.Response(503, text="Service Unavailable"),
    )
    with pytest.raises(UpstreamError) as exc_info:
        await IbgeClient(url=URL).fetch_aggregate()
    assert exc_info.value.http_status == 503


async def test_timeout_is_transport_error(upstream):
    upstream.get(host="ibge.test", path="/agregados/6397").mock(
        side_effect=httpx.ReadTimeout("timed out"),
    )
    with pytest.raises(TransportError, match="IBGE request error"):
        await IbgeClient(url=URL).fetch_aggregate()


async def test_undecodable_body_is_transport_error(upstream):
    upstream.get(host="ibge.test", path="/agregados/6397").mock(
        return_value=httpx.Response(200, text="<html>maintenance</html>"),
    )
    with pytest.raises(TransportError):
        await IbgeClient(url=URL).fetch_aggregate()
