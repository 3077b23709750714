"""Core Layer: pure domain logic, no IO, no async, no HTTP.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - All functions are deterministic except keypair generation (OS entropy)

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
"""
