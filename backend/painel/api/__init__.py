"""API Layer: FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes are thin adapters: parse the request, call one service, shape the response
    - All endpoints return JSON (static files excepted)
"""
