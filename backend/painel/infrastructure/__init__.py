"""Infrastructure Layer: external service clients and cross-cutting concerns.

Invariants:
    - Infrastructure never imports services/ or api/
    - Every outbound call maps failures to core.errors types
"""
