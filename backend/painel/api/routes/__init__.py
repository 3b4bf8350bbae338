"""Route Modules: one file per endpoint.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes never contain business logic (delegate to services/)
    - The same routers back the standalone app (main.py) and the
      per-function apps (serverless.py)
"""
