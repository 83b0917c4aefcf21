"""Services Layer — business rules between routes and the record store.

Invariants:
    - Services receive their repository at construction (no global lookup)
    - Services raise domain errors from core/errors.py, never HTTPException
"""
