"""Student Repository — SQLAlchemy implementation of the StudentRepository protocol.

Invariants:
    - One repository per AsyncSession (one per request)
    - insert/update commit immediately and refresh the instance
    - Unique-email violation on insert → session rolled back, DuplicateEmailError raised
    - list_all/list_active return id-ascending (insertion) order

Design Decisions:
    - Storage unique index is the authoritative duplicate signal; the service
      pre-check is only a fast path (ADR: check-then-insert race)
    - No validation here: callers pre-validate
"""

import logging

from sqlalchemy import exists, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from student_records.core.domain_types import StudentId
from student_records.core.errors import DuplicateEmailError
from student_records.models.student import Student

logger = logging.getLogger(__name__)


class SqlAlchemyStudentRepository:
    """Student persistence backed by an async SQLAlchemy session."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def insert(self, student: Student) -> Student:
        email = student.email
        self._db.add(student)
        try:
            await self._db.commit()
        except IntegrityError as e:
            await self._db.rollback()
            logger.warning(
                f"Unique constraint rejected student insert: {e.orig}",
                extra={"error_code": "CONFLICT"},
            )
            raise DuplicateEmailError(email)
        await self._db.refresh(student)
        return student

    async def get_by_id(self, student_id: StudentId) -> Student | None:
        return await self._db.get(Student, student_id)

    async def get_by_email(self, email: str) -> Student | None:
        result = await self._db.execute(
            select(Student).where(Student.email == email),
        )
        return result.scalar_one_or_none()

    async def exists_by_email(self, email: str) -> bool:
        result = await self._db.execute(
            select(exists().where(Student.email == email)),
        )
        return bool(result.scalar())

    async def update(self, student: Student) -> Student:
        self._db.add(student)
        await self._db.commit()
        await self._db.refresh(student)
        return student

    async def list_all(self) -> list[Student]:
        result = await self._db.execute(select(Student).order_by(Student.id))
        return list(result.scalars().all())

    async def list_active(self) -> list[Student]:
        result = await self._db.execute(
            select(Student).where(Student.active.is_(True)).order_by(Student.id),
        )
        return list(result.scalars().all())

    async def count(self) -> int:
        result = await self._db.execute(
            select(func.count()).select_from(Student),
        )
        return int(result.scalar_one())
