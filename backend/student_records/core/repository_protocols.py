"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Record store performs no validation; callers pre-validate
    - Implementations provided by shell via constructor injection

Design Decisions:
    - Protocol over ABC: structural subtyping, so test fakes need no inheritance
    - Async in Protocol: implementations do IO; the service awaits them
"""

from datetime import date
from typing import Protocol


class StudentLike(Protocol):
    """Structural contract for student records handed across the store boundary.

    Avoids coupling core to the ORM model while giving type checkers
    real attribute information.
    """
    id: int | None
    full_name: str
    email: str
    birth_date: date | None
    active: bool


class StudentRepository(Protocol):
    """Contract for student persistence — implemented by shell."""
    async def insert(self, student: StudentLike) -> StudentLike: ...
    async def get_by_id(self, student_id: int) -> StudentLike | None: ...
    async def get_by_email(self, email: str) -> StudentLike | None: ...
    async def exists_by_email(self, email: str) -> bool: ...
    async def update(self, student: StudentLike) -> StudentLike: ...
    async def list_all(self) -> list[StudentLike]: ...
    async def list_active(self) -> list[StudentLike]: ...
    async def count(self) -> int: ...
