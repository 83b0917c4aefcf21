"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure and deterministic
    - Nothing in core/ knows about HTTP status codes

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
"""
