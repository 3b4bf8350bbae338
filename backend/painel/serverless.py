"""Per-Function Apps: one minimal ASGI app per endpoint for serverless deploys.

Invariants:
    - Each app mounts exactly one route module from api/routes, with the same
      error handlers as main.py: behavior is identical to the standalone server
    - No CORS and no static files (the platform serves those)

Design Decisions:
    - Thin adapter over the shared routers instead of a parallel copy of the
      handlers; a platform entry file only needs `from painel.serverless import gemini_app as app`
"""

import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI

from painel.api.error_handlers import register_error_handlers
from painel.api.routes import (
    gemini_explain, gemini_series, gemini_status, health, ibge,
)
from painel.config import get_settings
from painel.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _function_lifespan(app: FastAPI):
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    yield


def create_function_app(router: APIRouter, title: str) -> FastAPI:
    """Wrap a single route module as a standalone ASGI app."""
    app = FastAPI(
        title=title, lifespan=_function_lifespan,
        docs_url=None, redoc_url=None, openapi_url=None,
    )
    register_error_handlers(app)
    app.include_router(router)
    return app


ping_app = create_function_app(health.router, "ping")
gemini_status_app = create_function_app(gemini_status.router, "gemini-status")
ibge_app = create_function_app(ibge.router, "ibge-6397")
gemini_app = create_function_app(gemini_explain.router, "gemini")
gemini_series_app = create_function_app(gemini_series.router, "gemini-series")
