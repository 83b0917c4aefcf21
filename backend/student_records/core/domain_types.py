"""Domain Types — identity type and field limits for student records.

Invariants:
    - StudentId wraps the integer primary key — never use a bare int in service signatures
    - Field limits live here once and are shared by validation, ORM and migrations

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
"""

from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

StudentId = NewType("StudentId", int)


# ─── Field Limits ────────────────────────────────────────────────

FULL_NAME_MIN_LENGTH = 3
FULL_NAME_MAX_LENGTH = 120
EMAIL_MAX_LENGTH = 120
