"""Static Site: serves the dashboard front end with an index.html fallback.

Invariants:
    - Registered last, so every /api route takes precedence
    - Files outside the static directory are never served
    - Unknown paths fall back to index.html (SPA-style); 404 when it is absent
    - Non-GET requests: 405 with the real Allow header on a known route path,
      404 anywhere else

Design Decisions:
    - GET catch-all route instead of a StaticFiles mount at "/": a mount would
      swallow non-GET requests to API paths and lose their 405 Allow header
    - The non-GET catch-all is a full match, so it wins over the partial
      (method-mismatch) matches of earlier routes; it answers 405 itself for
      those paths, using the methods of the route that owns them
"""

from pathlib import Path

from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import FileResponse
from starlette.routing import Match

OTHER_METHODS = ["POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def _allowed_methods(request: Request, own_endpoints: tuple) -> set[str]:
    """Methods of the first non-static route whose path matches the request."""
    for route in request.app.router.routes:
        if getattr(route, "endpoint", None) in own_endpoints:
            continue
        match, _ = route.matches(request.scope)
        if match == Match.PARTIAL:
            return set(getattr(route, "methods", None) or ())
    return set()


def build_static_router(directory: str | Path) -> APIRouter:
    root = Path(directory).resolve()
    router = APIRouter(tags=["static"])

    @router.get("/{path:path}", include_in_schema=False)
    async def serve_static(path: str):
        candidate = (root / path).resolve()
        if path and candidate.is_relative_to(root) and candidate.is_file():
            return FileResponse(candidate)
        index = root / "index.html"
        if index.is_file():
            return FileResponse(index)
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail="Not Found")

    @router.api_route("/{path:path}", methods=OTHER_METHODS, include_in_schema=False)
    async def reject_other_methods(request: Request, path: str):
        allowed = _allowed_methods(request, (serve_static, reject_other_methods))
        if allowed:
            raise HTTPException(
                status.HTTP_405_METHOD_NOT_ALLOWED,
                detail="Method Not Allowed",
                headers={"Allow": ", ".join(sorted(allowed))},
            )
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail="Not Found")

    return router
