"""Pydantic Schemas: request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies, status payloads)
    - Response field names match what the dashboard front end reads (camelCase aliases)
"""
