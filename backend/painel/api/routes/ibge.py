"""IBGE Proxy: GET /api/ibge/6397 (alias /api/ibge-6397), upstream JSON verbatim.

Invariants:
    - Upstream non-2xx status is mirrored with a generic error body
    - No transformation of the payload
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from painel.api.dependencies import get_ibge_client
from painel.infrastructure.ibge_client import IbgeClient
from painel.services.labor_statistics import fetch_labor_aggregate

router = APIRouter(prefix="/api", tags=["ibge"])


@router.get("/ibge/6397")
@router.get("/ibge-6397")
async def ibge_6397(client: IbgeClient = Depends(get_ibge_client)):
    return JSONResponse(content=await fetch_labor_aggregate(client))
