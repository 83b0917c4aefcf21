"""ORM Models — SQLAlchemy table mappings.

Invariants:
    - Every model inherits from db.base.Base
"""
