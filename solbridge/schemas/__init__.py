"""Pydantic Schemas: request/response contracts for API endpoints.

Invariants:
    - Schemas check JSON shape and integer ranges at the system boundary
    - Key and signature encodings are validated by core/, not here

Design Decisions:
    - Separate from core value types: schemas are API contracts, core types are domain
"""
