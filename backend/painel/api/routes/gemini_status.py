"""Gemini Status: credential presence and provider reachability diagnostics."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from painel.api.dependencies import get_gemini_client
from painel.infrastructure.gemini_client import GeminiClient
from painel.schemas.status import ProviderStatus
from painel.services.provider_status import check_provider_status

router = APIRouter(prefix="/api", tags=["gemini"])


@router.get("/gemini-status", response_model=ProviderStatus)
async def gemini_status(client: GeminiClient = Depends(get_gemini_client)):
    """200 reachable, 502 provider rejected the probe, 500 no key / network."""
    status_code, result = await check_provider_status(client)
    return JSONResponse(
        status_code=status_code, content=result.model_dump(by_alias=True),
    )
