"""Services Layer: one shared implementation per endpoint, used by every adapter.

Invariants:
    - Services take their clients as arguments (no settings lookups here)
    - Services return plain data or raise core.errors types; adapters do HTTP
"""
