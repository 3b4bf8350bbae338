"""Painel API: standalone FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map DashboardError -> structured JSON responses
    - CORS configured from settings (CORS_ORIGIN), not hardcoded
    - Static front end registered after every /api route

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - Same routers as serverless.py; this module only adds CORS, static files
      and the uvicorn entry point
"""

import logging
import os
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from painel.api.error_handlers import register_error_handlers
from painel.api.routes import (
    gemini_explain, gemini_series, gemini_status, health, ibge,
)
from painel.api.routes.static_site import build_static_router
from painel.infrastructure.observability import setup_logging
from painel.config import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    if not settings.gemini_api_key:
        logger.warning("GEMINI_API_KEY not configured; Gemini endpoints will fail")
    logger.info("Painel API started")
    yield
    logger.info("Painel API shutting down")


app = FastAPI(title="Painel API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(health.router)
app.include_router(gemini_status.router)
app.include_router(ibge.router)
app.include_router(gemini_explain.router)
app.include_router(gemini_series.router)

if os.path.isdir(settings.static_dir):
    app.include_router(build_static_router(settings.static_dir))


def run() -> None:
    """Console entry point: serve on HOST:PORT."""
    uvicorn.run(
        "painel.main:app", host=settings.host, port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    run()
